"""Domain models for the Twitch Live Monitor application."""

from twitch_live_monitor.domain.models.channel import Channel
from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials
from twitch_live_monitor.domain.models.status import (
    ChannelStatus,
    CycleResult,
    CycleStep,
    LiveState,
    StreamSession,
)

__all__ = [
    "AccessToken",
    "Channel",
    "ChannelStatus",
    "Credentials",
    "CycleResult",
    "CycleStep",
    "LiveState",
    "StreamSession",
]
