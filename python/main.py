#!/usr/bin/env python3
"""S3 Static Uploader - エントリーポイント"""
from s3_static_uploader.cli import run


if __name__ == "__main__":
    run()
