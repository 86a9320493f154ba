"""Abstract base class for access token acquisition."""

from abc import ABC, abstractmethod

from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials


class TokenProvider(ABC):
    """
    Abstract provider of app access tokens.

    Implementations exchange application credentials for a bearer token
    using the client-credentials grant. Tokens are not cached; every call
    performs a fresh exchange.
    """

    @abstractmethod
    async def fetch_token(self, credentials: Credentials) -> AccessToken:
        """
        Exchange credentials for a new access token.

        Args:
            credentials: Application client ID and secret

        Returns:
            A freshly issued access token

        Raises:
            AuthenticationError: If the token cannot be obtained for any reason
        """
        pass
