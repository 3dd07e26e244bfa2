"""テスト共通のフィクスチャとテストダブル"""
import errno
import io
import posixpath
from typing import Dict, List, Optional, Union

import pytest

from s3_static_uploader.core.uploader import UploadObject
from s3_static_uploader.utils.file_utils import FileInfo, join_path
from s3_static_uploader.utils.logger import LoggerManager


class MemoryFileSystem:
    """メモリ上のファイルツリー

    files の値が bytes ならファイル、例外ならその例外を open() で送出する。
    ディレクトリはファイルパスから自動的に作られる。
    """

    def __init__(self, files: Optional[Dict[str, Union[bytes, Exception]]] = None,
                 broken: Optional[Dict[str, OSError]] = None):
        self.files = files or {}
        self.broken = broken or {}
        self.opened: List[io.BytesIO] = []

    def _dirs(self):
        dirs = {"."}
        for path in self.files:
            parent = posixpath.dirname(path)
            while parent:
                dirs.add(parent)
                parent = posixpath.dirname(parent)
        return dirs

    def stat(self, path: str) -> FileInfo:
        if path in self.broken:
            raise self.broken[path]
        if path in self._dirs():
            return FileInfo(path=path, size=0, is_dir=True)
        if path in self.files:
            content = self.files[path]
            size = len(content) if isinstance(content, bytes) else 0
            return FileInfo(path=path, size=size)
        raise FileNotFoundError(errno.ENOENT, "file not found", path)

    def list_dir(self, path: str) -> List[FileInfo]:
        if path in self.broken:
            raise self.broken[path]
        prefix = "" if path == "." else f"{path}/"
        names = set()
        for candidate in list(self.files) + list(self._dirs()):
            if candidate != "." and candidate.startswith(prefix):
                rest = candidate[len(prefix):]
                if rest and "/" not in rest:
                    names.add(rest)
        return [self.stat(join_path(path, name)) for name in sorted(names)]

    def open(self, path: str) -> io.BytesIO:
        if path not in self.files:
            raise FileNotFoundError(errno.ENOENT, "file not found", path)
        content = self.files[path]
        if isinstance(content, Exception):
            raise content
        body = io.BytesIO(content)
        self.opened.append(body)
        return body


class RecordingUploader:
    """最後に受け取ったオブジェクトを記録する、または指定のエラーを送出する"""

    def __init__(self, upload_error: Optional[Exception] = None):
        self.upload_error = upload_error
        self.uploaded_object: Optional[UploadObject] = None
        self.uploads: List[UploadObject] = []
        self.bodies: Dict[str, bytes] = {}

    def upload(self, obj: UploadObject) -> None:
        if self.upload_error is not None:
            raise self.upload_error

        # 本文はアップロード中にしか読めない
        self.bodies[obj.path] = obj.body.read()
        self.uploaded_object = obj
        self.uploads.append(obj)


@pytest.fixture(autouse=True)
def reset_logger():
    LoggerManager.reset()
    yield
    LoggerManager.reset()


@pytest.fixture
def uploader():
    return RecordingUploader()


@pytest.fixture
def file_tree(tmp_path):
    """foo.txt と app/index.js を持つディレクトリ"""
    (tmp_path / "foo.txt").write_bytes(b"some body")
    (tmp_path / "app").mkdir()
    (tmp_path / "app" / "index.js").write_bytes(b"let foo = 'bar';")
    return tmp_path
