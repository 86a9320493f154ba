"""Abstract base class for configuration management."""

from abc import ABC, abstractmethod
from typing import Any


class ConfigurationProvider(ABC):
    """
    Abstract service for providing application configuration.

    This interface defines the contract for loading and validating
    configuration data from various sources (files, environment variables,
    built-in defaults).
    """

    @abstractmethod
    def get_channel_name(self) -> str:
        """
        Get the login name of the channel to monitor.

        Returns:
            Channel login, fixed for the lifetime of the process

        Raises:
            ConfigurationError: If configuration is invalid
        """
        pass

    @abstractmethod
    def get_poll_interval_seconds(self) -> float:
        """
        Get the delay between monitor cycles.

        Returns:
            Interval in seconds (60 by default)
        """
        pass

    @abstractmethod
    def get_twitch_api_config(self) -> Any:
        """
        Get Twitch endpoint and HTTP settings.

        Returns:
            Object exposing ``token_url``, ``users_url``, ``streams_url``
            and ``request_timeout_seconds``
        """
        pass

    @abstractmethod
    def get_logging_config(self) -> Any:
        """
        Get logging configuration.

        Returns:
            Object with logging settings (level, format, file path, rotation)
        """
        pass
