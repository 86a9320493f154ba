"""Twitch Helix channel repository implementation."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from twitch_live_monitor.domain.exceptions import ChannelNotFoundError, MalformedResponseError
from twitch_live_monitor.domain.models.channel import Channel
from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials
from twitch_live_monitor.domain.models.status import StreamSession
from twitch_live_monitor.domain.services.channel_repository import ChannelRepository
from twitch_live_monitor.infrastructure.twitch.http import TwitchHTTPClient
from twitch_live_monitor.infrastructure.twitch.schemas import DataEnvelope, UserRecord

logger = logging.getLogger(__name__)


class TwitchChannelRepository(TwitchHTTPClient, ChannelRepository):
    """
    Helix implementation of the channel repository.

    Resolves a channel login through ``/helix/users`` and lists its active
    streams through ``/helix/streams``.
    """

    async def get_channel(
        self, channel_name: str, credentials: Credentials, token: AccessToken
    ) -> Channel:
        """
        Look up a channel by its login name.

        Raises:
            ChannelNotFoundError: If the ``data`` array is empty
            MalformedResponseError: If the body or the first record has the wrong shape
            APIError: On network failure or an error status
        """
        response = await self._send(
            "GET",
            self.api_config.users_url,
            headers=self.helix_headers(credentials, token),
            params={"login": channel_name},
        )
        self.raise_for_status(response, "channel")
        entries = self._data_entries(self.json_body(response, "channel"), "channel")

        if not entries:
            raise ChannelNotFoundError(channel_name)

        record = entries[0]
        if not isinstance(record, dict):
            raise MalformedResponseError("channel", "record is not an object")

        try:
            user = UserRecord.model_validate(record)
        except ValidationError as e:
            raise MalformedResponseError("channel", "unable to retrieve channel ID", e) from e

        logger.debug(f"Channel data: {record}")
        return Channel(
            id=user.id,
            login=user.login or channel_name,
            display_name=user.display_name,
            attributes=record,
        )

    async def get_live_streams(
        self, channel: Channel, credentials: Credentials, token: AccessToken
    ) -> list[StreamSession]:
        """
        List the active streams for a channel.

        Raises:
            MalformedResponseError: If the body has no ``data`` list
            APIError: On network failure or an error status
        """
        response = await self._send(
            "GET",
            self.api_config.streams_url,
            headers=self.helix_headers(credentials, token),
            params={"user_id": channel.id},
        )
        self.raise_for_status(response, "streams")
        entries = self._data_entries(self.json_body(response, "streams"), "streams")

        return [
            StreamSession.from_entry(entry) if isinstance(entry, dict) else StreamSession()
            for entry in entries
        ]

    @staticmethod
    def _data_entries(body: Any, resource: str) -> list[Any]:
        """Extract the ``data`` list from a Helix envelope."""
        try:
            return DataEnvelope.model_validate(body).data
        except ValidationError as e:
            raise MalformedResponseError(resource, "missing data array", e) from e
