"""
Slack Uploader - Command Line

Uploads a comma-separated list of files to the configured Slack channel.

Usage:
    python run.py -files report.pdf,photo.jpg
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from config import ConfigError, load_config
from upload_module import RetryHandler, SlackClient, UploadError, UploadManager

logger = logging.getLogger(__name__)


@dataclass
class UploadSummary:
    """Outcome of one batch."""
    succeeded: List[str] = field(default_factory=list)
    failed: List[Tuple[str, UploadError]] = field(default_factory=list)


def parse_file_list(value: str) -> List[str]:
    """Split a comma-separated list and trim each path, keeping order."""
    return [path.strip() for path in value.split(',')]


def upload_files(manager: UploadManager, paths: List[str]) -> UploadSummary:
    """
    Upload files one at a time. A failed file never stops the batch.

    Args:
        manager: UploadManager bound to the destination channel
        paths: File paths in upload order

    Returns:
        UploadSummary with succeeded and failed paths
    """
    summary = UploadSummary()

    for path in paths:
        try:
            manager.upload_file(path)
        except UploadError as e:
            cause = e.__cause__
            detail = f"{e} ({cause})" if cause is not None else str(e)
            logger.error(f"Error uploading file {path}: {detail}")
            summary.failed.append((path, e))
        else:
            summary.succeeded.append(path)

    logger.info(f"Done: {len(summary.succeeded)} uploaded, {len(summary.failed)} failed")
    return summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Upload files to a Slack channel.")
    parser.add_argument('-files', '--files', dest='files', default=None,
                        help='Comma-separated list of file paths to upload (required)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the uploader. Returns the process exit status."""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        logger.critical(f"Error: {e}")
        return 1

    logging.getLogger().setLevel(getattr(logging, config.log_level))
    logger.info(f"Configuration loaded from {config.env_file or 'process environment'}")

    # Only a missing or empty value is fatal; blank paths fail per file
    if not args.files:
        # parser.error exits with status 2
        parser.error("Please provide at least one file path using the -files flag")

    client = SlackClient(config.bot_token)
    retry_handler = RetryHandler()
    logger.info(f"Retry policy: {retry_handler.get_max_attempts()} attempts, "
                f"{retry_handler.get_delay()}s delay")
    manager = UploadManager(client, config.channel_id, retry_handler=retry_handler)

    upload_files(manager, parse_file_list(args.files))
    return 0


if __name__ == '__main__':
    sys.exit(main())
