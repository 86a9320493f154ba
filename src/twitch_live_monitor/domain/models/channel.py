"""Channel domain model."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


@dataclass(frozen=True)
class Channel:
    """
    Represents a Twitch channel as returned by the user lookup.

    Only the identifier is needed to query live status; the remaining
    platform fields are kept in ``attributes`` for logging.
    """

    id: str
    login: str
    display_name: str | None = None
    attributes: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        """Validate channel data after initialization."""
        if not self.id:
            raise ValueError("Channel ID cannot be empty")
        if not self.login:
            raise ValueError("Channel login cannot be empty")

    @property
    def name(self) -> str:
        """Display name when available, login otherwise."""
        return self.display_name or self.login

    def __str__(self) -> str:
        """Human-readable string representation."""
        return f"Channel(name='{self.name}', id={self.id})"

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return (
            f"Channel(id='{self.id}', login='{self.login}', "
            f"display_name='{self.display_name}')"
        )
