"""Twitch app access token manager."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from twitch_live_monitor.domain.exceptions import AuthenticationError, TwitchMonitorError
from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials
from twitch_live_monitor.domain.services.token_provider import TokenProvider
from twitch_live_monitor.infrastructure.twitch.http import TwitchHTTPClient
from twitch_live_monitor.infrastructure.twitch.schemas import TokenResponse

logger = logging.getLogger(__name__)


class TwitchAuthManager(TwitchHTTPClient, TokenProvider):
    """
    Obtains Twitch app access tokens using the client-credentials grant.

    Tokens are never stored: each call to ``fetch_token`` performs a new
    exchange, and every failure surfaces as ``AuthenticationError``.
    """

    GRANT_TYPE = "client_credentials"

    async def fetch_token(self, credentials: Credentials) -> AccessToken:
        """
        Exchange credentials for a new app access token.

        Args:
            credentials: Application client ID and secret

        Returns:
            A freshly issued access token

        Raises:
            AuthenticationError: On network failure, error status, a non-JSON body
                or a body without a usable ``access_token``
        """
        try:
            response = await self._send(
                "POST",
                self.api_config.token_url,
                data={
                    "client_id": credentials.client_id,
                    "client_secret": credentials.client_secret,
                    "grant_type": self.GRANT_TYPE,
                },
            )
            self.raise_for_status(response, "token")
            body = self.json_body(response, "token")
            token = TokenResponse.model_validate(body)
        except ValidationError as e:
            raise AuthenticationError(
                "failed to fetch token: response has no usable access_token", e
            ) from e
        except TwitchMonitorError as e:
            raise AuthenticationError(f"failed to fetch token: {e}", e) from e

        logger.debug(f"Obtained app access token (expires in {token.expires_in}s)")
        return AccessToken(
            value=token.access_token,
            token_type=token.token_type or "bearer",
            expires_in=token.expires_in,
        )
