"""Twitch API integration implementations."""

from twitch_live_monitor.infrastructure.twitch.auth_manager import TwitchAuthManager
from twitch_live_monitor.infrastructure.twitch.channel_repository import TwitchChannelRepository

__all__ = [
    "TwitchAuthManager",
    "TwitchChannelRepository",
]
