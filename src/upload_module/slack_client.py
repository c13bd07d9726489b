"""
Slack Client - Upload Module
Thin wrapper around slack_sdk's WebClient for file uploads.
"""

import logging
from typing import Dict, Optional

from slack_sdk import WebClient

logger = logging.getLogger(__name__)


class UploadError(Exception):
    """Exception raised when a file cannot be uploaded."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class SlackClient:
    """Upload capability backed by the Slack Web API."""

    def __init__(self, token: str, client: Optional[WebClient] = None):
        """
        Initialize Slack client.

        Args:
            token: Slack bot token (xoxb-...)
            client: Optional preconfigured WebClient (creates new if None)
        """
        # Retries are owned by RetryHandler, so the SDK must not retry on its own
        self.client = client or WebClient(token=token, retry_handlers=[])

    def upload(self, request) -> Dict:
        """
        Upload one file to a channel.

        Args:
            request: UploadRequest with channel, filename, title, comment,
                open stream and size

        Returns:
            Dictionary describing the uploaded file

        Raises:
            SlackApiError: If Slack rejects the upload
        """
        # A failed attempt may have consumed part of the stream
        request.stream.seek(0)

        response = self.client.files_upload_v2(
            channel=request.channel,
            file=request.stream,
            filename=request.filename,
            title=request.title,
            initial_comment=request.comment,
        )

        file_obj = response.get('file') or {}
        return {
            'id': file_obj.get('id'),
            'name': file_obj.get('name') or request.filename,
            'title': file_obj.get('title') or request.title,
            'permalink': file_obj.get('permalink'),
            'size': file_obj.get('size') or request.size_bytes,
        }
