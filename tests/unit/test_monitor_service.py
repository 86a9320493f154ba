"""Tests for the channel monitor service."""

from __future__ import annotations

import io
import logging
from unittest.mock import AsyncMock, Mock

import pytest

from twitch_live_monitor.application.services.monitor_service import ChannelMonitorService
from twitch_live_monitor.domain.exceptions import (
    APIError,
    AuthenticationError,
    ChannelNotFoundError,
    MalformedResponseError,
)
from twitch_live_monitor.domain.models.credentials import Credentials
from twitch_live_monitor.domain.models.status import CycleStep, StreamSession
from twitch_live_monitor.infrastructure.reporting import ConsoleStatusReporter


@pytest.fixture
def monitor_service(
    credentials: Credentials,
    mock_token_provider: AsyncMock,
    mock_channel_repository: AsyncMock,
    mock_reporter: Mock,
) -> ChannelMonitorService:
    """Monitor service wired with mocks."""
    return ChannelMonitorService(
        credentials=credentials,
        channel_name="examplechannel",
        token_provider=mock_token_provider,
        channel_repository=mock_channel_repository,
        reporter=mock_reporter,
    )


class TestChannelMonitorService:
    """Tests for ChannelMonitorService."""

    def test_empty_channel_name(
        self,
        credentials: Credentials,
        mock_token_provider: AsyncMock,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
    ) -> None:
        """Test that a channel name is required."""
        with pytest.raises(ValueError):
            ChannelMonitorService(
                credentials, "", mock_token_provider, mock_channel_repository, mock_reporter
            )

    @pytest.mark.asyncio
    async def test_offline_cycle(
        self,
        monitor_service: ChannelMonitorService,
        mock_token_provider: AsyncMock,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
        credentials: Credentials,
        access_token,
        sample_channel,
    ) -> None:
        """Test a cycle for an offline channel."""
        result = await monitor_service.run_cycle()

        assert result.is_success
        assert result.is_live is False
        mock_token_provider.fetch_token.assert_awaited_once_with(credentials)
        mock_channel_repository.get_channel.assert_awaited_once_with(
            "examplechannel", credentials, access_token
        )
        mock_channel_repository.get_live_streams.assert_awaited_once_with(
            sample_channel, credentials, access_token
        )
        mock_reporter.report.assert_called_once_with(result.status)

    @pytest.mark.asyncio
    async def test_live_cycle(
        self,
        monitor_service: ChannelMonitorService,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
        sample_stream: StreamSession,
    ) -> None:
        """Test a cycle for a live channel."""
        mock_channel_repository.get_live_streams.return_value = [sample_stream]

        result = await monitor_service.run_cycle()

        assert result.is_live is True
        assert result.status.streams == (sample_stream,)
        mock_reporter.report.assert_called_once()

    @pytest.mark.asyncio
    async def test_messages_printed_once(
        self,
        credentials: Credentials,
        mock_token_provider: AsyncMock,
        mock_channel_repository: AsyncMock,
        console_reporter: ConsoleStatusReporter,
        output_buffer: io.StringIO,
        sample_stream: StreamSession,
    ) -> None:
        """Test the exact live and offline lines."""
        service = ChannelMonitorService(
            credentials,
            "examplechannel",
            mock_token_provider,
            mock_channel_repository,
            console_reporter,
        )

        await service.run_cycle()
        mock_channel_repository.get_live_streams.return_value = [sample_stream]
        await service.run_cycle()

        assert output_buffer.getvalue().splitlines() == [
            "The channel is not live.",
            "The channel is live!",
        ]

    @pytest.mark.asyncio
    async def test_identical_cycles_print_identical_output(
        self,
        credentials: Credentials,
        mock_token_provider: AsyncMock,
        mock_channel_repository: AsyncMock,
        console_reporter: ConsoleStatusReporter,
        output_buffer: io.StringIO,
        sample_stream: StreamSession,
    ) -> None:
        """Test that repeated cycles with the same responses repeat the outcome."""
        mock_channel_repository.get_live_streams.return_value = [sample_stream]
        service = ChannelMonitorService(
            credentials,
            "examplechannel",
            mock_token_provider,
            mock_channel_repository,
            console_reporter,
        )

        await service.run_cycle()
        await service.run_cycle()

        assert output_buffer.getvalue().splitlines() == ["The channel is live!"] * 2

    @pytest.mark.asyncio
    async def test_token_failure(
        self,
        monitor_service: ChannelMonitorService,
        mock_token_provider: AsyncMock,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that a token failure stops the cycle before any lookup."""
        mock_token_provider.fetch_token.side_effect = AuthenticationError(
            "failed to fetch token: HTTP 401"
        )

        result = await monitor_service.run_cycle()

        assert not result.is_success
        assert result.failed_step == CycleStep.ACQUIRE_TOKEN
        assert isinstance(result.error, AuthenticationError)
        mock_channel_repository.get_channel.assert_not_awaited()
        mock_channel_repository.get_live_streams.assert_not_awaited()
        mock_reporter.report.assert_not_called()
        assert "Error fetching OAuth token: failed to fetch token" in caplog.text

    @pytest.mark.asyncio
    async def test_channel_not_found(
        self,
        monitor_service: ChannelMonitorService,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test that an unknown channel prints nothing and skips the stream lookup."""
        mock_channel_repository.get_channel.side_effect = ChannelNotFoundError("examplechannel")

        result = await monitor_service.run_cycle()

        assert result.failed_step == CycleStep.RESOLVE_CHANNEL
        mock_channel_repository.get_live_streams.assert_not_awaited()
        mock_reporter.report.assert_not_called()
        assert (
            "Error checking if channel is live: no data found for channel: examplechannel"
            in caplog.text
        )

    @pytest.mark.asyncio
    async def test_malformed_channel(
        self,
        monitor_service: ChannelMonitorService,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
    ) -> None:
        """Test a malformed user record."""
        mock_channel_repository.get_channel.side_effect = MalformedResponseError(
            "channel", "unable to retrieve channel ID"
        )

        result = await monitor_service.run_cycle()

        assert result.failed_step == CycleStep.RESOLVE_CHANNEL
        mock_reporter.report.assert_not_called()

    @pytest.mark.asyncio
    async def test_stream_query_failure(
        self,
        monitor_service: ChannelMonitorService,
        mock_channel_repository: AsyncMock,
        mock_reporter: Mock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test a failed stream lookup."""
        mock_channel_repository.get_live_streams.side_effect = APIError("HTTP 503", 503)

        result = await monitor_service.run_cycle()

        assert result.failed_step == CycleStep.QUERY_STATUS
        assert result.is_live is None
        mock_reporter.report.assert_not_called()
        assert "Error checking if channel is live: HTTP 503" in caplog.text

    @pytest.mark.asyncio
    async def test_cycles_are_independent(
        self,
        monitor_service: ChannelMonitorService,
        mock_token_provider: AsyncMock,
        mock_reporter: Mock,
        access_token,
    ) -> None:
        """Test that a failed cycle does not affect the next one."""
        mock_token_provider.fetch_token.side_effect = [
            AuthenticationError("failed to fetch token: timeout"),
            access_token,
        ]

        first = await monitor_service.run_cycle()
        second = await monitor_service.run_cycle()

        assert not first.is_success
        assert second.is_success
        assert mock_token_provider.fetch_token.await_count == 2
        mock_reporter.report.assert_called_once()

    @pytest.mark.asyncio
    async def test_status_logged(
        self,
        monitor_service: ChannelMonitorService,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Test the informational log line for an offline channel."""
        caplog.set_level(logging.INFO, logger="twitch_live_monitor")

        await monitor_service.run_cycle()

        assert "ExampleChannel is offline" in caplog.text
