"""
Configuration - Slack Uploader

Loads environment variables into an explicit config value.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ConfigError(ValueError):
    """Raised when required configuration is missing or invalid."""
    pass


@dataclass(frozen=True)
class Config:
    """Settings needed for one upload run."""
    bot_token: str
    channel_id: str
    log_level: str = 'INFO'
    env_file: Optional[str] = None


def load_env_file(env_file: Optional[str] = None) -> Optional[str]:
    """
    Import variables from a dotenv file into the process environment.

    Variables already set in the environment win over the file.

    Args:
        env_file: Explicit path, or None to search for '.env' from the cwd

    Returns:
        Path of the loaded file, or None if no file was found
    """
    path = env_file or find_dotenv(usecwd=True)
    if not path or not os.path.isfile(path):
        logger.warning(f"No .env file found ({env_file or '.env'}), using process environment only")
        return None

    load_dotenv(path, override=False)
    logger.debug(f"Loaded environment from {path}")
    return path


def load_config(env_file: Optional[str] = None,
                environ: Optional[Mapping[str, str]] = None) -> Config:
    """
    Build the run configuration.

    Args:
        env_file: Optional dotenv path (ignored when environ is given)
        environ: Mapping to read instead of os.environ

    Returns:
        Config with bot token and channel id

    Raises:
        ConfigError: If SLACK_BOT_TOKEN or CHANNEL_ID is missing, or
            LOG_LEVEL is not a known level name
    """
    loaded_from = None
    if environ is None:
        loaded_from = load_env_file(env_file)
        environ = os.environ

    bot_token = (environ.get('SLACK_BOT_TOKEN') or '').strip()
    channel_id = (environ.get('CHANNEL_ID') or '').strip()

    missing = [name for name, value in (('SLACK_BOT_TOKEN', bot_token),
                                        ('CHANNEL_ID', channel_id)) if not value]
    if missing:
        raise ConfigError(
            f"{' and '.join(missing)} must be set in the environment or the .env file"
        )

    log_level = (environ.get('LOG_LEVEL') or 'INFO').strip().upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Config(
        bot_token=bot_token,
        channel_id=channel_id,
        log_level=log_level,
        env_file=loaded_from,
    )
