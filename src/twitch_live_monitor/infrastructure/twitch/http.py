"""Shared HTTP plumbing for Twitch API adapters."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

import httpx

from twitch_live_monitor.domain.exceptions import APIError, MalformedResponseError
from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials
from twitch_live_monitor.infrastructure.config.models import TwitchAPIConfig

logger = logging.getLogger(__name__)


class TwitchHTTPClient:
    """
    Base class for adapters that talk to Twitch over HTTP.

    When no client is injected, a new ``httpx.AsyncClient`` is opened for
    every request and closed afterwards.
    """

    def __init__(
        self,
        api_config: TwitchAPIConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the HTTP adapter.

        Args:
            api_config: Endpoint URLs and request timeout
            http_client: Optional shared client (used by tests and long-lived callers)
        """
        self.api_config = api_config
        self.http_client = http_client

    @asynccontextmanager
    async def _client(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.http_client is not None:
            yield self.http_client
            return

        async with httpx.AsyncClient(timeout=self.api_config.request_timeout_seconds) as client:
            yield client

    async def _send(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        """Send a request, translating transport failures to ``APIError``."""
        logger.debug(f"{method} {url}")
        try:
            async with self._client() as client:
                return await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            raise APIError(f"Request to {url} failed: {e}", cause=e) from e

    @staticmethod
    def helix_headers(credentials: Credentials, token: AccessToken) -> dict[str, str]:
        """Headers required by every Helix endpoint."""
        return {
            "Client-ID": credentials.client_id,
            "Authorization": token.authorization_header,
        }

    @staticmethod
    def raise_for_status(response: httpx.Response, resource: str) -> None:
        """Raise ``APIError`` for non-success responses."""
        if response.is_success:
            return
        raise APIError(
            f"Twitch API returned HTTP {response.status_code} for {resource}: "
            f"{response.text[:200]}",
            response.status_code,
        )

    @staticmethod
    def json_body(response: httpx.Response, resource: str) -> Any:
        """Decode a JSON body, raising ``MalformedResponseError`` when it is not JSON."""
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(resource, "response is not valid JSON", e) from e
