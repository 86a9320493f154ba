"""Console implementation of the status reporter."""

from __future__ import annotations

from rich.console import Console

from twitch_live_monitor.domain.models.status import ChannelStatus
from twitch_live_monitor.domain.services.status_reporter import StatusReporter


class ConsoleStatusReporter(StatusReporter):
    """Prints one plain line per successful cycle to standard output."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def report(self, status: ChannelStatus) -> None:
        self.console.print(
            self.format_status(status), markup=False, highlight=False, soft_wrap=True
        )
