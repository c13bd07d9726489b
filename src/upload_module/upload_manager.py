"""
Upload Manager - Upload Module
Checks a local file, derives its display labels and uploads it with retries.
"""

import logging
import os
from dataclasses import dataclass
from typing import BinaryIO, Dict, Optional, Tuple

from upload_module.retry_handler import RetryHandler
from upload_module.slack_client import UploadError

logger = logging.getLogger(__name__)


# Extension -> (title, comment)
PDF_LABELS = ('PDF Document', "Here's the PDF document")
IMAGE_LABELS = ('Image File', "Here's the image file")
DEFAULT_LABELS = ('Uploaded File', "Here's the uploaded file")

FILE_LABELS = {
    '.pdf': PDF_LABELS,
    '.png': IMAGE_LABELS,
    '.jpg': IMAGE_LABELS,
    '.jpeg': IMAGE_LABELS,
    '.gif': IMAGE_LABELS,
}


class FileCheckError(UploadError):
    """Local file problem. Never retried."""
    pass


class FileNotAccessibleError(FileCheckError):
    """Raised when the file does not exist or cannot be read."""
    pass


class EmptyFileError(FileCheckError):
    """Raised when the file has zero bytes."""
    pass


class PathResolutionError(FileCheckError):
    """Raised when the path cannot be made absolute."""
    pass


@dataclass
class UploadRequest:
    """Everything the client needs for one upload."""
    channel: str
    filename: str
    title: str
    comment: str
    stream: BinaryIO
    size_bytes: int
    path: str = ''


def describe_file(file_path: str) -> Tuple[str, str]:
    """Return (title, comment) for a file based on its extension."""
    ext = os.path.splitext(file_path)[1].lower()
    return FILE_LABELS.get(ext, DEFAULT_LABELS)


class UploadManager:
    """
    Upload single files to one channel.

    Flow:
    1. Stat the path, reject missing and empty files
    2. Resolve the absolute path and open the file
    3. Derive title and comment from the extension
    4. Upload through the retry handler
    """

    def __init__(self, client, channel_id: str, retry_handler: Optional[RetryHandler] = None):
        """
        Initialize upload manager.

        Args:
            client: Object with upload(request) -> dict (SlackClient in production)
            channel_id: Destination channel id
            retry_handler: Optional RetryHandler (default policy if None)
        """
        self.client = client
        self.channel_id = channel_id
        self.retry_handler = retry_handler or RetryHandler()

    def check_file(self, file_path: str) -> int:
        """
        Verify the file exists and is not empty.

        Returns:
            File size in bytes
        """
        try:
            size = os.stat(file_path).st_size
        except OSError as e:
            raise FileNotAccessibleError(f"cannot access {file_path}: {e}", path=file_path) from e

        if size == 0:
            raise EmptyFileError("file is empty", path=file_path)

        return size

    def upload_file(self, file_path: str) -> Dict:
        """
        Upload a file to the configured channel.

        Args:
            file_path: Path to the file

        Returns:
            Descriptor returned by the client for the uploaded file

        Raises:
            FileCheckError: If the file is missing, empty or unreadable
            RetriesExhaustedError: If every upload attempt failed
        """
        size = self.check_file(file_path)

        try:
            abs_path = os.path.abspath(file_path)
        except OSError as e:
            raise PathResolutionError(f"cannot resolve {file_path}: {e}", path=file_path) from e

        title, comment = describe_file(file_path)

        try:
            stream = open(abs_path, 'rb')
        except OSError as e:
            raise FileNotAccessibleError(f"cannot open {abs_path}: {e}", path=file_path) from e

        with stream:
            request = UploadRequest(
                channel=self.channel_id,
                filename=os.path.basename(file_path),
                title=title,
                comment=comment,
                stream=stream,
                size_bytes=size,
                path=abs_path,
            )

            logger.info(f"Uploading file '{request.filename}' to channel '{self.channel_id}' ({size} bytes)")

            result = self.retry_handler.run(lambda: self.client.upload(request), path=file_path)

        logger.info(f"File upload successful: {result}")
        return result
