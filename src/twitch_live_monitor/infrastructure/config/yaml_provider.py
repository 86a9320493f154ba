"""YAML-based configuration provider implementation."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from twitch_live_monitor.domain.exceptions import ConfigurationError
from twitch_live_monitor.domain.services.configuration_provider import ConfigurationProvider
from twitch_live_monitor.infrastructure.config.models import (
    AppConfig,
    LoggingConfig,
    TwitchAPIConfig,
)

# ${VAR_NAME} or ${VAR_NAME:default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


class YamlConfigurationProvider(ConfigurationProvider):
    """
    Configuration provider that loads settings from YAML files.

    This implementation supports loading configuration from YAML files
    with environment variable substitution and validation using Pydantic models.
    Without a path, the built-in defaults are used.
    """

    def __init__(self, config_path: str | Path | None = None) -> None:
        """
        Initialize the YAML configuration provider.

        Args:
            config_path: Path to the YAML configuration file, or None for defaults

        Raises:
            ConfigurationError: If the configuration file cannot be loaded or is invalid
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: AppConfig | None = None
        self._overrides: dict[str, dict[str, Any]] = {}
        self._load_config()

    def _load_config(self) -> None:
        """Load and validate configuration from the YAML file."""
        raw_config = self._read_raw_config()

        for section, values in self._overrides.items():
            raw_config[section] = {**(raw_config.get(section) or {}), **values}

        try:
            self._config = AppConfig(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e
        except TypeError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def _read_raw_config(self) -> dict[str, Any]:
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in configuration file: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if not raw_config:
            raise ConfigurationError("Configuration file is empty")
        if not isinstance(raw_config, dict):
            raise ConfigurationError("Configuration file must contain a mapping")

        return self._substitute_env_vars(raw_config)

    def _substitute_env_vars(self, obj: Any) -> Any:
        """
        Recursively substitute environment variables in configuration.

        Supports ${VAR_NAME} and ${VAR_NAME:default_value} syntax.
        """
        if isinstance(obj, dict):
            return {key: self._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [self._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            return self._substitute_string_env_vars(obj)
        else:
            return obj

    def _substitute_string_env_vars(self, value: str) -> str:
        """Substitute environment variables in a string value."""

        def replace_var(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.getenv(var_name, default_value)

        return ENV_VAR_PATTERN.sub(replace_var, value)

    @property
    def config(self) -> AppConfig:
        """Get the loaded configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config

    def override(self, section: str, **values: Any) -> None:
        """
        Override settings from another source (such as command-line options).

        None values are ignored. The file is read again and earlier overrides are kept.

        Raises:
            ConfigurationError: If the overridden configuration is invalid
        """
        values = {key: value for key, value in values.items() if value is not None}
        if not values:
            return
        self._overrides.setdefault(section, {}).update(values)
        self._load_config()

    def get_channel_name(self) -> str:
        """Get the login name of the channel to monitor."""
        return self.config.monitor.channel_name

    def get_poll_interval_seconds(self) -> float:
        """Get the delay between monitor cycles."""
        return self.config.monitor.poll_interval_seconds

    def get_twitch_api_config(self) -> TwitchAPIConfig:
        """Get Twitch endpoint and HTTP settings."""
        return self.config.twitch_api

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.config.logging
