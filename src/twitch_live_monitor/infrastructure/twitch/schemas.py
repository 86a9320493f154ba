"""Pydantic models for Twitch API response bodies."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TokenResponse(BaseModel):
    """
    Body of a successful client-credentials grant.

    Only ``access_token`` is required; unusable optional fields are dropped.
    """

    access_token: str = Field(..., min_length=1)
    token_type: str | None = None
    expires_in: int | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("token_type", mode="before")
    @classmethod
    def drop_invalid_token_type(cls, v: Any) -> str | None:
        return v if isinstance(v, str) and v else None

    @field_validator("expires_in", mode="before")
    @classmethod
    def drop_invalid_expiry(cls, v: Any) -> int | None:
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
            return None
        return int(v)


class UserRecord(BaseModel):
    """A single entry of the Helix users lookup."""

    id: str = Field(..., min_length=1)
    login: str | None = None
    display_name: str | None = None

    model_config = ConfigDict(extra="allow")


class DataEnvelope(BaseModel):
    """Helix list envelope: ``{"data": [...]}``. Entries are validated separately."""

    data: list[Any]

    model_config = ConfigDict(extra="allow")
