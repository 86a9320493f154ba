"""Use case for validating application configuration."""

from __future__ import annotations

from typing import Callable

from twitch_live_monitor.domain.exceptions import ConfigurationError
from twitch_live_monitor.domain.models.credentials import Credentials
from twitch_live_monitor.domain.services.configuration_provider import ConfigurationProvider


class ValidateConfigUseCase:
    """
    Use case for validating the application configuration.

    Checks the monitor settings, Twitch endpoints, logging settings and,
    when supplied, the application credentials. No network calls are made.
    """

    VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

    def __init__(self, config_provider: ConfigurationProvider) -> None:
        """
        Initialize the validation use case.

        Args:
            config_provider: Configuration provider to validate
        """
        self.config_provider = config_provider

    def execute(self, credentials_loader: Callable[[], Credentials] | None = None) -> list[str]:
        """
        Execute configuration validation.

        Args:
            credentials_loader: Optional zero-argument callable returning
                ``Credentials``; its ``ConfigurationError`` is reported

        Returns:
            List of validation error messages (empty if valid)
        """
        errors: list[str] = []

        try:
            if not self.config_provider.get_channel_name():
                errors.append("No channel name configured")

            interval = self.config_provider.get_poll_interval_seconds()
            if interval <= 0:
                errors.append(f"Invalid poll interval: {interval} seconds (must be positive)")

            api_config = self.config_provider.get_twitch_api_config()
            for name in ("token_url", "users_url", "streams_url"):
                url = getattr(api_config, name)
                if not url.startswith("https://"):
                    errors.append(f"Endpoint {name} does not use HTTPS: {url}")

            logging_config = self.config_provider.get_logging_config()
            log_level = str(logging_config.level).upper()
            if log_level not in self.VALID_LOG_LEVELS:
                errors.append(
                    f"Invalid log level: {log_level} (must be one of {self.VALID_LOG_LEVELS})"
                )

        except Exception as e:
            errors.append(f"Configuration validation failed: {e}")

        if credentials_loader is not None:
            error = self.validate_credentials(credentials_loader)
            if error:
                errors.append(error)

        return errors

    def validate_credentials(self, credentials_loader: Callable[[], Credentials]) -> str | None:
        """
        Validate that credentials can be loaded.

        Returns:
            Error message if loading fails, None if successful
        """
        try:
            credentials = credentials_loader()
        except ConfigurationError as e:
            return str(e)

        if not isinstance(credentials, Credentials):
            return "Credentials loader did not return credentials"
        return None
