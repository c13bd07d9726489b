"""
Upload Module - Slack Uploader

Uploads local files to a Slack channel with a fixed retry policy.

Components:
- SlackClient: Slack Web API wrapper (one upload capability)
- RetryHandler: Fixed-count, fixed-delay retry policy
- UploadManager: File checks, label derivation and the upload itself
"""

from upload_module.slack_client import SlackClient, UploadError
from upload_module.retry_handler import RetryHandler, RetriesExhaustedError
from upload_module.upload_manager import (
    EmptyFileError,
    FileCheckError,
    FileNotAccessibleError,
    PathResolutionError,
    UploadManager,
    UploadRequest,
    describe_file,
)

__all__ = [
    'SlackClient',
    'UploadError',
    'RetryHandler',
    'RetriesExhaustedError',
    'UploadManager',
    'UploadRequest',
    'describe_file',
    'FileCheckError',
    'FileNotAccessibleError',
    'EmptyFileError',
    'PathResolutionError',
]
