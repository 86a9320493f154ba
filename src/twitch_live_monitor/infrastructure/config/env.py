"""Credential loading from an environment file."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from twitch_live_monitor.domain.exceptions import ConfigurationError
from twitch_live_monitor.domain.models.credentials import Credentials

logger = logging.getLogger(__name__)

CLIENT_ID_VAR = "CLIENT_ID"
CLIENT_SECRET_VAR = "CLIENT_SECRET"
DEFAULT_ENV_FILE = ".env"


def load_env_file(env_file: str | Path | None = None) -> Path:
    """
    Load variables from an environment file into ``os.environ``.

    Variables already present in the process environment are not overridden.

    Args:
        env_file: Path to the file; ``.env`` in the working directory when None

    Returns:
        The path that was loaded

    Raises:
        ConfigurationError: If the file does not exist or cannot be read
    """
    path = Path(env_file) if env_file is not None else Path.cwd() / DEFAULT_ENV_FILE

    if not path.is_file():
        raise ConfigurationError(f"Error loading .env file: {path} not found")

    try:
        load_dotenv(dotenv_path=path, override=False)
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Error loading .env file: {e}", e) from e

    logger.debug(f"Loaded environment from {path}")
    return path


def credentials_from_environment() -> Credentials:
    """
    Read application credentials from the process environment.

    Raises:
        ConfigurationError: If CLIENT_ID or CLIENT_SECRET is missing or empty
    """
    client_id = os.getenv(CLIENT_ID_VAR, "").strip()
    client_secret = os.getenv(CLIENT_SECRET_VAR, "").strip()
    if not client_id or not client_secret:
        raise ConfigurationError(
            f"{CLIENT_ID_VAR} and {CLIENT_SECRET_VAR} must be set in the environment"
        )
    return Credentials(client_id=client_id, client_secret=client_secret)


def load_credentials(env_file: str | Path | None = None) -> Credentials:
    """Load the environment file, then read credentials from the environment."""
    load_env_file(env_file)
    return credentials_from_environment()
