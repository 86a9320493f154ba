"""Abstract base class for channel and stream lookups."""

from abc import ABC, abstractmethod

from twitch_live_monitor.domain.models.channel import Channel
from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials
from twitch_live_monitor.domain.models.status import StreamSession


class ChannelRepository(ABC):
    """
    Abstract repository for channel data.

    This interface defines the contract for resolving a channel login to
    the platform's identifier and for listing the channel's active streams.
    Every call is authorized with the client ID and a bearer token.
    """

    @abstractmethod
    async def get_channel(
        self, channel_name: str, credentials: Credentials, token: AccessToken
    ) -> Channel:
        """
        Look up a channel by its login name.

        Args:
            channel_name: Channel login to resolve
            credentials: Application credentials (client ID is sent as a header)
            token: Bearer token for this cycle

        Returns:
            The channel record, including its platform identifier

        Raises:
            ChannelNotFoundError: If no record matches the login
            MalformedResponseError: If the response does not have the expected shape
            APIError: If the API call fails
        """
        pass

    @abstractmethod
    async def get_live_streams(
        self, channel: Channel, credentials: Credentials, token: AccessToken
    ) -> list[StreamSession]:
        """
        List the active streams for a channel.

        Args:
            channel: Channel resolved by ``get_channel``
            credentials: Application credentials (client ID is sent as a header)
            token: Bearer token for this cycle

        Returns:
            Active stream entries; empty when the channel is offline

        Raises:
            MalformedResponseError: If the response does not have the expected shape
            APIError: If the API call fails
        """
        pass
