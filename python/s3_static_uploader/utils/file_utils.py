"""ファイル操作関連のユーティリティ"""
import errno
import os
import posixpath
import stat
from typing import BinaryIO, List, Protocol
from dataclasses import dataclass


ROOT = "."


@dataclass
class FileInfo:
    """ファイル情報

    path はウォークのルートからの相対パス（区切りは常に "/"）。
    """
    path: str
    size: int
    is_dir: bool = False

    @property
    def name(self) -> str:
        return posixpath.basename(self.path)


def join_path(parent: str, name: str) -> str:
    """相対パスを "/" で連結（ルート直下は "./" を付けない）"""
    if parent in ("", ROOT):
        return name
    return f"{parent}/{name}"


class FileSystem(Protocol):
    """ウォーク対象のファイルシステム"""

    def stat(self, path: str) -> FileInfo:
        ...

    def list_dir(self, path: str) -> List[FileInfo]:
        ...

    def open(self, path: str) -> BinaryIO:
        ...


class LocalFileSystem:
    """ローカルディスク上のディレクトリをルートとするファイルシステム"""

    def __init__(self, root: str = ROOT):
        self.root = root

    def resolve(self, path: str) -> str:
        """相対パスをホストのパスに変換"""
        normalized = posixpath.normpath(path) if path else ROOT
        if (posixpath.isabs(normalized) or normalized == ".."
                or normalized.startswith("../")):
            raise OSError(errno.EINVAL, "invalid path", path)
        if normalized == ROOT:
            return self.root
        return os.path.join(self.root, *normalized.split("/"))

    def stat(self, path: str) -> FileInfo:
        """シンボリックリンクは辿らずに情報を取得"""
        st = os.lstat(self.resolve(path))
        return FileInfo(path=path, size=st.st_size, is_dir=stat.S_ISDIR(st.st_mode))

    def list_dir(self, path: str) -> List[FileInfo]:
        """子エントリを名前順で取得"""
        entries = []
        with os.scandir(self.resolve(path)) as it:
            for entry in it:
                is_dir = entry.is_dir(follow_symlinks=False)
                entries.append(FileInfo(
                    path=join_path(path, entry.name),
                    size=0 if is_dir else entry.stat(follow_symlinks=False).st_size,
                    is_dir=is_dir
                ))
        entries.sort(key=lambda info: info.name)
        return entries

    def open(self, path: str) -> BinaryIO:
        return open(self.resolve(path), "rb")
