"""Credential and token domain models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Credentials:
    """
    Twitch application identity used for the client-credentials grant.

    Loaded once at startup and never modified afterwards.
    """

    client_id: str
    client_secret: str

    def __post_init__(self) -> None:
        """Validate credential values after initialization."""
        if not self.client_id:
            raise ValueError("Client ID cannot be empty")
        if not self.client_secret:
            raise ValueError("Client secret cannot be empty")

    @property
    def masked_secret(self) -> str:
        """Client secret with all but the last four characters hidden."""
        if len(self.client_secret) <= 4:
            return "*" * len(self.client_secret)
        return "*" * (len(self.client_secret) - 4) + self.client_secret[-4:]

    def __repr__(self) -> str:
        """Developer-friendly representation that never leaks the secret."""
        return f"Credentials(client_id='{self.client_id}', client_secret='{self.masked_secret}')"

    __str__ = __repr__


@dataclass(frozen=True)
class AccessToken:
    """Short-lived app access token. Fetched for a single cycle only."""

    value: str
    token_type: str = "bearer"
    expires_in: int | None = None

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Access token cannot be empty")

    @property
    def authorization_header(self) -> str:
        """Value for the ``Authorization`` request header."""
        return f"Bearer {self.value}"

    def __repr__(self) -> str:
        return f"AccessToken(token_type='{self.token_type}', expires_in={self.expires_in})"

    __str__ = __repr__
