"""Pydantic configuration models for application settings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_CHANNEL_NAME = "zackrawrr"


class MonitorSettings(BaseModel):
    """Configuration for the monitored channel and polling cadence."""

    channel_name: str = Field(
        default=DEFAULT_CHANNEL_NAME, min_length=1, description="Login of the channel to monitor"
    )
    poll_interval_seconds: float = Field(
        default=60.0, gt=0, le=86400, description="Delay between monitor cycles in seconds"
    )

    @field_validator("channel_name")
    @classmethod
    def validate_channel_name(cls, v: str) -> str:
        """Normalize the channel login."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Channel name cannot be blank")
        if not all(ch.isalnum() or ch == "_" for ch in v):
            raise ValueError(f"Invalid Twitch channel name: {v}")
        return v

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Configuration for application logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string"
    )
    file_path: str | None = Field(default=None, description="Log file path (None for console only)")
    max_file_size: int = Field(default=10485760, ge=1024, description="Max log file size in bytes (10MB)")
    backup_count: int = Field(default=5, ge=1, description="Number of backup log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    model_config = ConfigDict(extra="forbid")


class TwitchAPIConfig(BaseModel):
    """Configuration for Twitch API access."""

    token_url: str = Field(
        default="https://id.twitch.tv/oauth2/token", description="OAuth2 token endpoint"
    )
    users_url: str = Field(
        default="https://api.twitch.tv/helix/users", description="Helix user lookup endpoint"
    )
    streams_url: str = Field(
        default="https://api.twitch.tv/helix/streams", description="Helix stream lookup endpoint"
    )
    request_timeout_seconds: float | None = Field(
        default=None, gt=0, description="Per-request timeout (None waits indefinitely)"
    )

    @field_validator("token_url", "users_url", "streams_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate endpoint URLs."""
        if not v.startswith(("https://", "http://")):
            raise ValueError(f"Endpoint must be an http(s) URL: {v}")
        return v

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    """
    Main application configuration model.

    Every section has defaults, so an empty configuration monitors the
    default channel against the production Twitch endpoints.
    """

    monitor: MonitorSettings = Field(default_factory=MonitorSettings)
    twitch_api: TwitchAPIConfig = Field(default_factory=TwitchAPIConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
