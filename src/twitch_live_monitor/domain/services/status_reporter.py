"""Abstract base class for reporting live status."""

from abc import ABC, abstractmethod

from twitch_live_monitor.domain.models.status import ChannelStatus


class StatusReporter(ABC):
    """Sink for the human-readable outcome of a successful monitor cycle."""

    LIVE_MESSAGE = "The channel is live!"
    OFFLINE_MESSAGE = "The channel is not live."

    @abstractmethod
    def report(self, status: ChannelStatus) -> None:
        """
        Report the live status of a channel exactly once.

        Args:
            status: Outcome of the live status query
        """
        pass

    def format_status(self, status: ChannelStatus) -> str:
        """Message for a status: live-affirmative or live-negative."""
        return self.LIVE_MESSAGE if status.is_live else self.OFFLINE_MESSAGE
