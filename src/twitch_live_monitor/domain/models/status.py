"""Live status and monitor cycle result models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping

from twitch_live_monitor.domain.models.channel import Channel


class LiveState(str, Enum):
    """Broadcast state of a channel."""

    LIVE = "live"
    OFFLINE = "offline"


class CycleStep(str, Enum):
    """Steps of a monitor cycle, in execution order."""

    ACQUIRE_TOKEN = "acquire_token"
    RESOLVE_CHANNEL = "resolve_channel"
    QUERY_STATUS = "query_status"


@dataclass(frozen=True)
class StreamSession:
    """An active stream entry from the streams lookup."""

    id: str | None = None
    user_id: str | None = None
    title: str | None = None
    game_name: str | None = None
    viewer_count: int | None = None
    started_at: str | None = None

    @classmethod
    def from_entry(cls, entry: Mapping[str, Any]) -> StreamSession:
        """Build a session from a raw stream entry, ignoring unknown fields."""
        viewer_count = entry.get("viewer_count")
        return cls(
            id=entry.get("id"),
            user_id=entry.get("user_id"),
            title=entry.get("title"),
            game_name=entry.get("game_name"),
            viewer_count=viewer_count if isinstance(viewer_count, int) else None,
            started_at=entry.get("started_at"),
        )

    def __str__(self) -> str:
        title = self.title or "untitled"
        viewers = self.viewer_count if self.viewer_count is not None else "?"
        return f"'{title}' ({viewers} viewers)"


@dataclass(frozen=True)
class ChannelStatus:
    """Outcome of a successful live status query."""

    channel: Channel
    streams: tuple[StreamSession, ...] = ()
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_live(self) -> bool:
        """True iff at least one active stream was returned."""
        return len(self.streams) > 0

    @property
    def state(self) -> LiveState:
        return LiveState.LIVE if self.is_live else LiveState.OFFLINE


@dataclass(frozen=True)
class CycleResult:
    """
    Result of a single monitor cycle.

    Exactly one of ``status`` and ``error`` is set.
    """

    channel_name: str
    status: ChannelStatus | None = None
    error: Exception | None = None
    failed_step: CycleStep | None = None

    @property
    def is_success(self) -> bool:
        return self.status is not None and self.error is None

    @property
    def is_live(self) -> bool | None:
        """Live flag, or None when the cycle failed."""
        if self.status is None:
            return None
        return self.status.is_live

    def __str__(self) -> str:
        if self.status is not None:
            return f"✅ {self.channel_name}: {self.status.state.value}"
        step = self.failed_step.value if self.failed_step else "unknown"
        return f"❌ {self.channel_name}: failed at {step} - {self.error}"
