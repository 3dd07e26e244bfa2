"""S3クライアント管理"""
import boto3
from typing import Optional
from ..models.config import AWSConfig
from ..utils.logger import LoggerManager


class S3ClientManager:
    """S3クライアントの作成と管理"""

    def __init__(self, aws_config: AWSConfig):
        self.aws_config = aws_config
        self.logger = LoggerManager.get_logger()
        self._client: Optional[boto3.client] = None

    def get_client(self) -> boto3.client:
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self) -> boto3.client:
        """静的な認証情報でS3クライアントを作成"""
        self.aws_config.require_credentials()

        session = boto3.Session(
            aws_access_key_id=self.aws_config.access_key_id,
            aws_secret_access_key=self.aws_config.secret_access_key,
            region_name=self.aws_config.region
        )
        s3_client = session.client(
            's3',
            region_name=self.aws_config.region,
            endpoint_url=self.aws_config.endpoint_url
        )

        if self.aws_config.endpoint_url:
            self.logger.info(
                f"S3 client created for endpoint {self.aws_config.endpoint_url} "
                f"({self.aws_config.region})."
            )
        else:
            self.logger.info(f"S3 client created for region {self.aws_config.region}.")
        return s3_client
