"""Twitch Live Monitor - polls the Twitch API to report whether a channel is live."""

__version__ = "0.1.0"
__description__ = "Polls the Twitch Helix API on an interval and reports whether a channel is live"

from twitch_live_monitor.domain.models import Channel, ChannelStatus, Credentials

__all__ = ["Channel", "ChannelStatus", "Credentials"]
