"""ウォークしたエントリをアップロードに振り分ける"""
from typing import Optional

from ..models.errors import OpenError, UploadError, WalkAccessError
from ..utils.content_type import content_type_for
from ..utils.file_utils import FileInfo, FileSystem
from ..utils.logger import LoggerManager
from .uploader import Uploader, UploadObject


class UploadDispatcher:
    """walk() のコールバックとしてファイルを 1 件ずつアップロードする"""

    def __init__(self, fs: FileSystem, uploader: Uploader):
        self.fs = fs
        self.uploader = uploader
        self.logger = LoggerManager.get_logger()
        self.uploaded = 0

    def __call__(self, path: str, entry: Optional[FileInfo],
                 error: Optional[BaseException]):
        if error is not None:
            raise WalkAccessError(path, error) from error

        # S3 にディレクトリはない。キーがパスのように見えるだけなので処理しない
        if entry.is_dir:
            self.logger.info(f"Found directory: {path}")
            return

        content_type = content_type_for(path)

        try:
            body = self.fs.open(path)
        except OSError as e:
            raise OpenError(path, e) from e

        with body:
            try:
                self.uploader.upload(UploadObject(
                    path=path,
                    body=body,
                    content_type=content_type
                ))
            except UploadError:
                raise
            except Exception as e:
                raise UploadError(path, e) from e

        self.uploaded += 1
        self.logger.info(f"Uploaded {path}")
