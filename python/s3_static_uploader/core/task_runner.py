"""アップロードタスクの実行"""
from typing import Optional

from ..models.config import Config
from ..utils.file_utils import FileSystem, LocalFileSystem, ROOT
from ..utils.logger import LoggerManager
from .dispatcher import UploadDispatcher
from .s3_client import S3ClientManager
from .transfer import TransferConfigManager
from .uploader import DryRunUploader, S3ObjectUploader, Uploader
from .walker import walk


class TaskRunner:
    """ルートディレクトリ以下を全てアップロードする"""

    def __init__(self, config: Config, uploader: Optional[Uploader] = None,
                 filesystem: Optional[FileSystem] = None):
        self.config = config
        self.logger = LoggerManager.get_logger()
        self.filesystem = filesystem or LocalFileSystem(config.options.root)
        self.uploader = uploader or self._create_uploader()

    def _create_uploader(self) -> Uploader:
        options = self.config.options
        if options.dry_run:
            return DryRunUploader(options.bucket)

        # ウォーク開始前に認証情報の不足を検出する
        client_manager = S3ClientManager(self.config.aws)
        return S3ObjectUploader(
            client_manager.get_client(),
            options.bucket,
            file_acl=options.file_acl,
            tags=options.tags,
            transfer_config=TransferConfigManager.create_config(options)
        )

    def run(self) -> int:
        """ウォークを実行し、アップロードしたファイル数を返す

        最初のエラーで中断する。それまでにアップロードしたものは残る。
        """
        options = self.config.options
        self.logger.info(
            f"Starting upload of {options.root} to bucket {options.bucket}"
        )

        dispatcher = UploadDispatcher(self.filesystem, self.uploader)
        walk(self.filesystem, dispatcher, ROOT)

        self.logger.info(f"Upload completed: {dispatcher.uploaded} files uploaded")
        return dispatcher.uploaded
