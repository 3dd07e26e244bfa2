"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
import json
import os

from .errors import MissingCredentialsError


ACCESS_KEY_ENV = "AWS_ACCESS_KEY_ID"
SECRET_KEY_ENV = "AWS_SECRET_ACCESS_KEY"
DEFAULT_REGION = "us-east-1"


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AWSConfig:
    """AWS関連の設定"""
    region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = field(default=None, repr=False)
    secret_access_key: Optional[str] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.region:
            self.region = DEFAULT_REGION
        # 空文字はエンドポイント未指定として扱う
        if not self.endpoint_url:
            self.endpoint_url = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str], **kwargs) -> 'AWSConfig':
        """環境変数から認証情報を読み込み"""
        kwargs["access_key_id"] = environ.get(ACCESS_KEY_ENV) or kwargs.get("access_key_id")
        kwargs["secret_access_key"] = environ.get(SECRET_KEY_ENV) or kwargs.get("secret_access_key")
        return cls(**kwargs)

    def require_credentials(self):
        """認証情報が揃っているか確認"""
        if not self.access_key_id or not self.secret_access_key:
            raise MissingCredentialsError(
                f"Both '{ACCESS_KEY_ENV}' and '{SECRET_KEY_ENV}' "
                "must be provided as environment variables."
            )


@dataclass
class UploadOptions:
    """アップロードオプション"""
    bucket: str
    root: str = "."
    file_acl: str = "public-read"
    app_version: Optional[str] = None
    dry_run: bool = False
    multipart_threshold: int = 8 * 1024 * 1024  # 8MB
    multipart_chunksize: int = 8 * 1024 * 1024  # 8MB
    use_threads: bool = False

    def __post_init__(self):
        if not self.bucket or not self.bucket.strip():
            raise ValueError("bucket cannot be empty")

        if not self.root:
            self.root = "."

        if self.multipart_threshold <= 0 or self.multipart_chunksize <= 0:
            raise ValueError(
                f"Invalid multipart settings: threshold={self.multipart_threshold}, "
                f"chunksize={self.multipart_chunksize}. Both must be positive"
            )

    @property
    def tags(self) -> Dict[str, Optional[str]]:
        """オブジェクトに付与するメタデータ"""
        tags: Dict[str, Optional[str]] = {}
        if self.app_version:
            # S3 上では x-amz-meta-app-version として保存される
            tags["app-version"] = self.app_version
        return tags


@dataclass
class Config:
    """メイン設定クラス"""
    logging: LoggingConfig
    aws: AWSConfig
    options: UploadOptions

    @classmethod
    def from_dict(cls, data: Dict[str, Any],
                  environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """辞書から設定を作成（認証情報は環境変数から）"""
        if environ is None:
            environ = os.environ

        logging_config = LoggingConfig(**data.get("logging", {}))
        aws_config = AWSConfig.from_env(environ, **data.get("aws", {}))
        options = UploadOptions(**data.get("options", {}))

        return cls(logging=logging_config, aws=aws_config, options=options)

    @classmethod
    def from_file(cls, config_path: str,
                  environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """設定ファイルから読み込み"""
        return cls.from_dict(cls._load_json(config_path), environ)

    @classmethod
    def from_args(cls, args: Any,
                  environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """コマンドライン引数から設定を作成

        --config が指定されていればそのファイルを土台にし、
        明示された引数で上書きする。
        """
        data: Dict[str, Any] = {}
        if getattr(args, "config", None):
            data = cls._load_json(args.config)

        logging_data = dict(data.get("logging", {}))
        aws_data = dict(data.get("aws", {}))
        options_data = dict(data.get("options", {}))

        overrides = (
            (logging_data, "level", "log_level"),
            (aws_data, "region", "region"),
            (aws_data, "endpoint_url", "endpoint"),
            (options_data, "bucket", "bucket"),
            (options_data, "root", "root"),
            (options_data, "file_acl", "acl"),
            (options_data, "app_version", "app_version"),
        )
        for section, key, attr in overrides:
            value = getattr(args, attr, None)
            if value is not None:
                section[key] = value

        if getattr(args, "dry_run", False):
            options_data["dry_run"] = True
        options_data.setdefault("bucket", "")

        return cls.from_dict(
            {"logging": logging_data, "aws": aws_data, "options": options_data},
            environ
        )

    @staticmethod
    def _load_json(config_path: str) -> Dict[str, Any]:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Configuration file {config_path} not found.")

        try:
            with open(config_path, "r", encoding="utf-8") as file:
                return json.load(file)
        except json.JSONDecodeError as e:
            raise ValueError(f"Error decoding JSON from {config_path}: {e}")
