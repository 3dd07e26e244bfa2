"""S3アップロード実行クラス"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, BinaryIO, Dict, Mapping, Optional, Protocol

from boto3.exceptions import S3UploadFailedError
from boto3.s3.transfer import TransferConfig
from botocore.exceptions import BotoCoreError, ClientError

from ..models.errors import UploadError
from ..utils.logger import LoggerManager


@dataclass
class UploadObject:
    """アップロードする 1 ファイル分の情報"""
    path: str
    body: BinaryIO
    content_type: str = ""


class Uploader(Protocol):
    """ファイルをリモートに保存する"""

    def upload(self, obj: UploadObject) -> None:
        """失敗時は例外を送出する"""
        ...


class S3ObjectUploader:
    """S3 互換ストレージへのアップロード"""

    def __init__(self, s3_client, bucket: str, file_acl: str = "public-read",
                 tags: Optional[Mapping[str, Optional[str]]] = None,
                 transfer_config: Optional[TransferConfig] = None):
        self.s3_client = s3_client
        self.bucket = bucket
        self.file_acl = file_acl
        # ウォーク中は変更しない
        self.tags: Mapping[str, Optional[str]] = MappingProxyType(dict(tags or {}))
        self.transfer_config = transfer_config

    def extra_args(self, obj: UploadObject) -> Dict[str, Any]:
        """upload_fileobj に渡す ExtraArgs を作成"""
        extra_args: Dict[str, Any] = {
            "ACL": self.file_acl,
            "Metadata": {k: v for k, v in self.tags.items() if v is not None},
        }
        if obj.content_type:
            extra_args["ContentType"] = obj.content_type
        return extra_args

    def upload(self, obj: UploadObject) -> None:
        kwargs: Dict[str, Any] = {"ExtraArgs": self.extra_args(obj)}
        if self.transfer_config is not None:
            kwargs["Config"] = self.transfer_config

        try:
            self.s3_client.upload_fileobj(obj.body, self.bucket, obj.path, **kwargs)
        except (BotoCoreError, ClientError, S3UploadFailedError) as e:
            raise UploadError(obj.path, e) from e


class DryRunUploader:
    """アップロードせずにログだけ出す"""

    def __init__(self, bucket: str):
        self.bucket = bucket
        self.logger = LoggerManager.get_logger()

    def upload(self, obj: UploadObject) -> None:
        self.logger.info(
            f"[DRY RUN]: Would upload {obj.path} to {self.bucket}/{obj.path} "
            f"({obj.content_type or 'no content type'})"
        )
