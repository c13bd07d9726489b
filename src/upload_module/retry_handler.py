"""
Retry Handler - Upload Module

Retry a blocking upload a fixed number of times with a constant delay.
"""

import logging
import time
from typing import Any, Callable, Optional

from upload_module.slack_client import UploadError

logger = logging.getLogger(__name__)


class RetriesExhaustedError(UploadError):
    """Raised when every upload attempt failed."""

    def __init__(self, attempts: int, last_error: Optional[BaseException] = None,
                 path: Optional[str] = None):
        super().__init__(f"failed to upload file after {attempts} attempts", path=path)
        self.attempts = attempts
        self.last_error = last_error


class RetryHandler:
    """
    Retry Handler - Fixed Delay

    Runs an operation with a fixed retry policy:
    - Max attempts: 3
    - Delay between attempts: 2 seconds
    - No delay after the last attempt
    """

    MAX_ATTEMPTS = 3
    DELAY = 2  # seconds

    def __init__(self, max_attempts: int = MAX_ATTEMPTS, delay: float = DELAY,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Initialize retry handler.

        Args:
            max_attempts: Total number of attempts, including the first
            delay: Seconds to wait between attempts
            sleep: Blocking sleep function (replaced in tests)
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if delay < 0:
            raise ValueError("delay must not be negative")

        self.max_attempts = max_attempts
        self.delay = delay
        self.sleep = sleep

    def run(self, operation: Callable[[], Any], path: Optional[str] = None) -> Any:
        """
        Call operation until it succeeds or attempts run out.

        Args:
            operation: Zero-argument callable doing one attempt
            path: File path, used in logs and the final error

        Returns:
            Whatever operation returned on the successful attempt

        Raises:
            RetriesExhaustedError: If all attempts failed
        """
        last_error = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return operation()
            except Exception as e:
                last_error = e
                if attempt < self.max_attempts:
                    logger.warning(f"Upload attempt {attempt} failed: {e}. Retrying in {self.delay}s...")
                    self.sleep(self.delay)
                else:
                    logger.warning(f"Upload attempt {attempt} failed: {e}")

        logger.error(f"Giving up on {path or 'upload'} after {self.max_attempts} attempts")
        raise RetriesExhaustedError(self.max_attempts, last_error, path=path) from last_error

    def get_max_attempts(self) -> int:
        """Get maximum attempt count."""
        return self.max_attempts

    def get_delay(self) -> float:
        """Get retry delay in seconds."""
        return self.delay
