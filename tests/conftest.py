"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, Callable
from unittest.mock import AsyncMock, Mock

import httpx
import pytest
import yaml
from rich.console import Console

from twitch_live_monitor.domain.models.channel import Channel
from twitch_live_monitor.domain.models.credentials import AccessToken, Credentials
from twitch_live_monitor.domain.models.status import ChannelStatus, StreamSession
from twitch_live_monitor.infrastructure.config.models import AppConfig, TwitchAPIConfig
from twitch_live_monitor.infrastructure.reporting import ConsoleStatusReporter

TOKEN_URL = "https://id.twitch.tv/oauth2/token"
USERS_URL = "https://api.twitch.tv/helix/users"
STREAMS_URL = "https://api.twitch.tv/helix/streams"


@pytest.fixture
def sample_config_data() -> dict[str, Any]:
    """Sample configuration data for testing."""
    return {
        "monitor": {
            "channel_name": "examplechannel",
            "poll_interval_seconds": 30,
        },
        "twitch_api": {
            "token_url": TOKEN_URL,
            "users_url": USERS_URL,
            "streams_url": STREAMS_URL,
            "request_timeout_seconds": 10,
        },
        "logging": {
            "level": "INFO",
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            "file_path": None,
            "max_file_size": 10485760,
            "backup_count": 5,
        },
    }


@pytest.fixture
def temp_config_file(sample_config_data: dict[str, Any], tmp_path: Path) -> Path:
    """Create a temporary configuration file for testing."""
    path = tmp_path / "config.yml"
    path.write_text(yaml.dump(sample_config_data), encoding="utf-8")
    return path


@pytest.fixture
def app_config(sample_config_data: dict[str, Any]) -> AppConfig:
    """Create an AppConfig instance for testing."""
    return AppConfig(**sample_config_data)


@pytest.fixture
def api_config() -> TwitchAPIConfig:
    """Twitch endpoints used by the HTTP adapter tests."""
    return TwitchAPIConfig(token_url=TOKEN_URL, users_url=USERS_URL, streams_url=STREAMS_URL)


@pytest.fixture
def credentials() -> Credentials:
    """Sample application credentials."""
    return Credentials(client_id="test-client-id", client_secret="test-client-secret")


@pytest.fixture
def access_token() -> AccessToken:
    """Sample access token."""
    return AccessToken(value="test-access-token", expires_in=5000000)


@pytest.fixture
def sample_channel() -> Channel:
    """Channel record for examplechannel."""
    return Channel(
        id="12345",
        login="examplechannel",
        display_name="ExampleChannel",
        attributes={"id": "12345", "login": "examplechannel", "broadcaster_type": "partner"},
    )


@pytest.fixture
def sample_stream() -> StreamSession:
    """An active stream for examplechannel."""
    return StreamSession(
        id="40952121085",
        user_id="12345",
        title="Speedrunning all day",
        game_name="Just Chatting",
        viewer_count=4321,
        started_at="2026-10-18T12:00:00Z",
    )


@pytest.fixture
def live_status(sample_channel: Channel, sample_stream: StreamSession) -> ChannelStatus:
    return ChannelStatus(channel=sample_channel, streams=(sample_stream,))


@pytest.fixture
def offline_status(sample_channel: Channel) -> ChannelStatus:
    return ChannelStatus(channel=sample_channel)


@pytest.fixture
def output_buffer() -> io.StringIO:
    """Buffer capturing reporter output."""
    return io.StringIO()


@pytest.fixture
def console_reporter(output_buffer: io.StringIO) -> ConsoleStatusReporter:
    """Reporter writing plain lines into ``output_buffer``."""
    return ConsoleStatusReporter(Console(file=output_buffer, width=200))


@pytest.fixture
def mock_token_provider(access_token: AccessToken) -> AsyncMock:
    """Create a mock token provider."""
    mock = AsyncMock()
    mock.fetch_token.return_value = access_token
    return mock


@pytest.fixture
def mock_channel_repository(sample_channel: Channel) -> AsyncMock:
    """Create a mock channel repository (channel offline by default)."""
    mock = AsyncMock()
    mock.get_channel.return_value = sample_channel
    mock.get_live_streams.return_value = []
    return mock


@pytest.fixture
def mock_reporter() -> Mock:
    """Create a mock status reporter."""
    return Mock()


@pytest.fixture
def mock_config_provider(app_config: AppConfig) -> Mock:
    """Create a mock configuration provider."""
    mock = Mock()
    mock.get_channel_name.return_value = app_config.monitor.channel_name
    mock.get_poll_interval_seconds.return_value = app_config.monitor.poll_interval_seconds
    mock.get_twitch_api_config.return_value = app_config.twitch_api
    mock.get_logging_config.return_value = app_config.logging
    return mock


def endpoint_of(request: httpx.Request) -> str:
    """Request URL without its query string."""
    return f"{request.url.scheme}://{request.url.host}{request.url.path}"


class FakeTwitch:
    """
    In-memory Twitch API served through ``httpx.MockTransport``.

    Each endpoint answers with a (status, body) pair that tests may replace;
    a body of ``bytes`` is sent verbatim. Every request is recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_reply: tuple[int, Any] = (
            200,
            {"access_token": "test-access-token", "expires_in": 5000000, "token_type": "bearer"},
        )
        self.users_reply: tuple[int, Any] = (
            200,
            {"data": [{"id": "12345", "login": "examplechannel", "display_name": "ExampleChannel"}]},
        )
        self.streams_reply: tuple[int, Any] = (200, {"data": []})

    def set_live(self, live: bool = True) -> None:
        entries = [{"id": "40952121085", "user_id": "12345", "title": "Live!", "viewer_count": 10}]
        self.streams_reply = (200, {"data": entries if live else []})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        replies = {
            TOKEN_URL: self.token_reply,
            USERS_URL: self.users_reply,
            STREAMS_URL: self.streams_reply,
        }
        status, body = replies.get(endpoint_of(request), (404, {"error": "Not Found"}))
        if isinstance(body, bytes):
            return httpx.Response(status, content=body)
        return httpx.Response(status, json=body)

    def requests_to(self, url: str) -> list[httpx.Request]:
        return [r for r in self.requests if endpoint_of(r) == url]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def fake_twitch() -> FakeTwitch:
    """Fake Twitch API with a resolvable, offline channel."""
    return FakeTwitch()


@pytest.fixture
def env_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing a .env file and returning its path."""

    def _write(content: str = "CLIENT_ID=env-client-id\nCLIENT_SECRET=env-client-secret\n") -> Path:
        path = tmp_path / ".env"
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def clean_credentials_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure credentials from the real environment never leak into tests."""
    monkeypatch.delenv("CLIENT_ID", raising=False)
    monkeypatch.delenv("CLIENT_SECRET", raising=False)

