"""S3 Static Uploader パッケージ"""
from .models.config import Config
from .models.errors import (
    MissingCredentialsError,
    OpenError,
    UploadError,
    UploaderError,
    WalkAccessError,
)
from .utils.logger import LoggerManager
from .core.task_runner import TaskRunner


class StaticUploader:
    """静的ファイルアップローダーのメインクラス"""

    def __init__(self, config: Config):
        self.config = config

        # ロガーをセットアップ
        self.logger = LoggerManager.setup(self.config.logging)
        self.logger.info("S3 Static Uploader initialized")

        self.task_runner = TaskRunner(self.config)

    def run(self) -> int:
        """アップロードを実行"""
        return self.task_runner.run()


__all__ = [
    'StaticUploader',
    'Config',
    'UploaderError',
    'MissingCredentialsError',
    'WalkAccessError',
    'OpenError',
    'UploadError'
]
