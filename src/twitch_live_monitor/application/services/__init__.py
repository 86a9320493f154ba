"""Application service implementations."""

from twitch_live_monitor.application.services.monitor_service import ChannelMonitorService
from twitch_live_monitor.application.services.scheduler import MonitorScheduler

__all__ = [
    "ChannelMonitorService",
    "MonitorScheduler",
]
