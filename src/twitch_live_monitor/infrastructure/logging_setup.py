"""Logging setup for the application."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from twitch_live_monitor.infrastructure.config.models import LoggingConfig

ROOT_LOGGER_NAME = "twitch_live_monitor"


def configure_logging(config: LoggingConfig, verbose: bool = False) -> logging.Logger:
    """
    Configure the application logger from settings.

    Diagnostics go to stderr through Rich; when ``file_path`` is set they are
    also written to a size-rotated log file. Calling this again replaces the
    handlers installed by a previous call.

    Args:
        config: Logging settings
        verbose: Force DEBUG level regardless of ``config.level``

    Returns:
        The configured application logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose else config.level)

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)

    if config.file_path:
        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        logger.addHandler(file_handler)

    return logger
