"""コマンドラインエントリーポイント"""
import argparse
import os
import sys
from typing import List, Mapping, Optional

from . import StaticUploader
from .models.config import Config, DEFAULT_REGION
from .models.errors import UploaderError
from .utils.logger import LoggerManager


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3-static-uploader",
        description="Upload a directory of static files to an S3-compatible bucket."
    )
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--app-version", dest="app_version",
                        help="Application version to tag files with.")
    parser.add_argument("--bucket", help="Bucket name")
    parser.add_argument("--endpoint", help="AWS endpoint")
    parser.add_argument("--region", help=f"AWS region (default: {DEFAULT_REGION})")
    parser.add_argument("--root", help="Directory to upload (default: current directory)")
    parser.add_argument("--acl", help="ACL applied to every file (default: public-read)")
    parser.add_argument("--dry-run", dest="dry_run", action="store_true",
                        help="Log the files that would be uploaded without uploading")
    parser.add_argument("--log-level", dest="log_level", help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None,
         environ: Optional[Mapping[str, str]] = None) -> int:
    """メイン関数（終了コードを返す）"""
    args = build_parser().parse_args(argv)

    try:
        config = Config.from_args(args, os.environ if environ is None else environ)
    except (ValueError, TypeError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        StaticUploader(config).run()
    except UploaderError as e:
        LoggerManager.get_logger().error(f"Upload failed: {e}")
        return 1

    return 0


def run():
    sys.exit(main())
