"""Abstract base classes for domain services."""

from twitch_live_monitor.domain.services.channel_repository import ChannelRepository
from twitch_live_monitor.domain.services.configuration_provider import (
    ConfigurationProvider,
)
from twitch_live_monitor.domain.services.status_reporter import StatusReporter
from twitch_live_monitor.domain.services.token_provider import TokenProvider

__all__ = [
    "ChannelRepository",
    "ConfigurationProvider",
    "StatusReporter",
    "TokenProvider",
]
