"""Configuration providers and models."""

from twitch_live_monitor.infrastructure.config.env import load_credentials
from twitch_live_monitor.infrastructure.config.models import (
    AppConfig,
    LoggingConfig,
    MonitorSettings,
    TwitchAPIConfig,
)
from twitch_live_monitor.infrastructure.config.yaml_provider import YamlConfigurationProvider

__all__ = [
    "AppConfig",
    "LoggingConfig",
    "MonitorSettings",
    "TwitchAPIConfig",
    "YamlConfigurationProvider",
    "load_credentials",
]
