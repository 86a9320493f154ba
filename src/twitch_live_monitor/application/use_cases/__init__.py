"""Use case implementations for application workflows."""

from twitch_live_monitor.application.use_cases.validate_config import ValidateConfigUseCase

__all__ = [
    "ValidateConfigUseCase",
]
