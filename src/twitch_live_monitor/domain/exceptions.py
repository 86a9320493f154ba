"""Domain-specific exceptions for the Twitch Live Monitor application."""

from typing import Optional


class TwitchMonitorError(Exception):
    """Base exception for all Twitch Live Monitor errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ConfigurationError(TwitchMonitorError):
    """Raised when there are configuration-related errors."""

    pass


class AuthenticationError(TwitchMonitorError):
    """Raised when an app access token cannot be obtained."""

    pass


class APIError(TwitchMonitorError):
    """Raised when Twitch API calls fail."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, cause)
        self.status_code = status_code


class ChannelNotFoundError(TwitchMonitorError):
    """Raised when the user lookup returns no record for a channel."""

    def __init__(self, channel_name: str, cause: Optional[Exception] = None) -> None:
        message = f"no data found for channel: {channel_name}"
        super().__init__(message, cause)
        self.channel_name = channel_name


class MalformedResponseError(TwitchMonitorError):
    """Raised when a Twitch response body does not have the expected shape."""

    def __init__(
        self, resource: str, detail: str | None = None, cause: Optional[Exception] = None
    ) -> None:
        message = f"invalid data format for {resource}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message, cause)
        self.resource = resource
        self.detail = detail
