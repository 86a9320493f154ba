"""Interval scheduler that drives monitor cycles."""

from __future__ import annotations

import asyncio
import logging

from twitch_live_monitor.application.services.monitor_service import ChannelMonitorService
from twitch_live_monitor.domain.models.status import CycleResult

logger = logging.getLogger(__name__)


class MonitorScheduler:
    """
    Runs the monitor immediately and then on a fixed interval.

    Cycles run one at a time; the wait for the next tick starts after the
    previous cycle has finished. ``stop()`` sets the cancellation event and
    wakes the loop.
    """

    def __init__(self, service: ChannelMonitorService, interval_seconds: float = 60.0) -> None:
        if interval_seconds <= 0:
            raise ValueError(f"Interval must be positive: {interval_seconds}")
        self.service = service
        self.interval_seconds = interval_seconds
        self.cycles_run = 0
        self._stop_event = asyncio.Event()

    @property
    def is_stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        """Request the scheduler loop to exit."""
        self._stop_event.set()

    async def run_once(self) -> CycleResult | None:
        """
        Run a single monitor cycle.

        Returns:
            The cycle result, or None if the cycle raised an unexpected error
        """
        self.cycles_run += 1
        try:
            return await self.service.run_cycle()
        except Exception as e:
            logger.exception(f"Monitor cycle crashed: {e}")
            return None

    async def run(self, max_cycles: int | None = None) -> int:
        """
        Run cycles until stopped.

        Args:
            max_cycles: Stop after this many cycles (None runs until ``stop()``)

        Returns:
            Number of cycles run
        """
        logger.info(
            f"Monitoring {self.service.channel_name} every {self.interval_seconds:g} seconds"
        )
        start = self.cycles_run

        while not self.is_stopped:
            await self.run_once()
            if max_cycles is not None and self.cycles_run - start >= max_cycles:
                break
            if await self._wait_for_tick():
                break

        logger.info("Monitor stopped")
        return self.cycles_run - start

    async def _wait_for_tick(self) -> bool:
        """Sleep one interval. Returns True if stopped while waiting."""
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval_seconds)
        except asyncio.TimeoutError:
            return False
        return True
