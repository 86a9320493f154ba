"""Channel monitor service: one authenticate, resolve, query, report cycle."""

from __future__ import annotations

import logging

from twitch_live_monitor.domain.exceptions import TwitchMonitorError
from twitch_live_monitor.domain.models.credentials import Credentials
from twitch_live_monitor.domain.models.status import ChannelStatus, CycleResult, CycleStep
from twitch_live_monitor.domain.services.channel_repository import ChannelRepository
from twitch_live_monitor.domain.services.status_reporter import StatusReporter
from twitch_live_monitor.domain.services.token_provider import TokenProvider

logger = logging.getLogger(__name__)


class ChannelMonitorService:
    """
    Checks whether a single channel is live.

    Each cycle fetches a new token, resolves the channel login to its
    identifier, queries active streams and reports the outcome. Cycles keep
    no state between runs, so a failure never affects the next cycle.
    """

    def __init__(
        self,
        credentials: Credentials,
        channel_name: str,
        token_provider: TokenProvider,
        channel_repository: ChannelRepository,
        reporter: StatusReporter,
    ) -> None:
        """
        Initialize the monitor service.

        Args:
            credentials: Application credentials loaded at startup
            channel_name: Login of the channel to monitor
            token_provider: Source of app access tokens
            channel_repository: Channel and stream lookups
            reporter: Sink for the live/offline message
        """
        if not channel_name:
            raise ValueError("Channel name cannot be empty")
        self.credentials = credentials
        self.channel_name = channel_name
        self.token_provider = token_provider
        self.channel_repository = channel_repository
        self.reporter = reporter

    async def run_cycle(self) -> CycleResult:
        """
        Run one monitor cycle.

        Errors from any step are logged and returned in the result; the
        status is reported only when all three steps succeed.

        Returns:
            CycleResult with either the channel status or the error
        """
        logger.debug(f"Starting monitor cycle for {self.channel_name}")

        try:
            token = await self.token_provider.fetch_token(self.credentials)
        except TwitchMonitorError as e:
            logger.error(f"Error fetching OAuth token: {e}")
            return CycleResult(self.channel_name, error=e, failed_step=CycleStep.ACQUIRE_TOKEN)

        step = CycleStep.RESOLVE_CHANNEL
        try:
            channel = await self.channel_repository.get_channel(
                self.channel_name, self.credentials, token
            )
            step = CycleStep.QUERY_STATUS
            streams = await self.channel_repository.get_live_streams(
                channel, self.credentials, token
            )
        except TwitchMonitorError as e:
            logger.error(f"Error checking if channel is live: {e}")
            return CycleResult(self.channel_name, error=e, failed_step=step)

        status = ChannelStatus(channel=channel, streams=tuple(streams))
        if status.is_live:
            logger.info(f"{channel.name} is live: {', '.join(str(s) for s in status.streams)}")
        else:
            logger.info(f"{channel.name} is offline")

        self.reporter.report(status)
        return CycleResult(self.channel_name, status=status)
