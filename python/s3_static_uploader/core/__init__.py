"""S3 Static Uploader コアモジュール"""
from .dispatcher import UploadDispatcher
from .s3_client import S3ClientManager
from .task_runner import TaskRunner
from .uploader import DryRunUploader, S3ObjectUploader, Uploader, UploadObject
from .walker import walk

__all__ = [
    'UploadDispatcher',
    'S3ClientManager',
    'TaskRunner',
    'DryRunUploader',
    'S3ObjectUploader',
    'Uploader',
    'UploadObject',
    'walk'
]
