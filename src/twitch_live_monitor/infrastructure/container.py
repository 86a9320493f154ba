"""Dependency injection container configuration."""

from __future__ import annotations

from pathlib import Path

import httpx
from dependency_injector import containers, providers

from twitch_live_monitor.application.services.monitor_service import ChannelMonitorService
from twitch_live_monitor.application.services.scheduler import MonitorScheduler
from twitch_live_monitor.domain.models.credentials import Credentials
from twitch_live_monitor.domain.services.channel_repository import ChannelRepository
from twitch_live_monitor.domain.services.configuration_provider import ConfigurationProvider
from twitch_live_monitor.domain.services.status_reporter import StatusReporter
from twitch_live_monitor.domain.services.token_provider import TokenProvider
from twitch_live_monitor.infrastructure.config.yaml_provider import YamlConfigurationProvider
from twitch_live_monitor.infrastructure.reporting import ConsoleStatusReporter
from twitch_live_monitor.infrastructure.twitch.auth_manager import TwitchAuthManager
from twitch_live_monitor.infrastructure.twitch.channel_repository import TwitchChannelRepository


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container for the Twitch Live Monitor application.

    Holds the configuration provider as a singleton; services that need
    runtime values (credentials, overrides) are assembled by the getter
    functions below.
    """

    # Configuration
    config_file_path = providers.Configuration()

    # Configuration Provider
    configuration_provider = providers.Singleton(
        YamlConfigurationProvider,
        config_path=config_file_path,
    )

    # Shared HTTP client (None opens a client per request)
    http_client = providers.Object(None)


def create_container(config_path: str | Path | None = None) -> Container:
    """
    Create and configure the dependency injection container.

    Args:
        config_path: Path to the configuration file (None for built-in defaults)

    Returns:
        Configured container instance
    """
    container = Container()
    if config_path:
        container.config_file_path.override(str(config_path))
    return container


def get_configuration_provider(container: Container) -> YamlConfigurationProvider:
    """
    Get the configuration provider from the container.

    Args:
        container: The dependency injection container

    Returns:
        Configuration provider instance
    """
    return container.configuration_provider()


def _http_client(container: Container) -> httpx.AsyncClient | None:
    return container.http_client()


def get_token_provider(container: Container) -> TokenProvider:
    """Get the app access token provider."""
    config_provider: ConfigurationProvider = get_configuration_provider(container)
    return TwitchAuthManager(config_provider.get_twitch_api_config(), _http_client(container))


def get_channel_repository(container: Container) -> ChannelRepository:
    """Get the channel repository."""
    config_provider = get_configuration_provider(container)
    return TwitchChannelRepository(
        config_provider.get_twitch_api_config(), _http_client(container)
    )


def get_monitor_service(
    container: Container,
    credentials: Credentials,
    reporter: StatusReporter | None = None,
) -> ChannelMonitorService:
    """Get the channel monitor service."""
    config_provider = get_configuration_provider(container)
    return ChannelMonitorService(
        credentials=credentials,
        channel_name=config_provider.get_channel_name(),
        token_provider=get_token_provider(container),
        channel_repository=get_channel_repository(container),
        reporter=reporter or ConsoleStatusReporter(),
    )


def get_scheduler(
    container: Container,
    credentials: Credentials,
    reporter: StatusReporter | None = None,
) -> MonitorScheduler:
    """Get the interval scheduler wrapping the monitor service."""
    config_provider = get_configuration_provider(container)
    return MonitorScheduler(
        get_monitor_service(container, credentials, reporter),
        interval_seconds=config_provider.get_poll_interval_seconds(),
    )
