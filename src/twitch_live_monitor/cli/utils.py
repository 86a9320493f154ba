"""Utility functions for CLI output."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from twitch_live_monitor.domain.services.configuration_provider import ConfigurationProvider

console = Console()


def display_error_summary(errors: list[str]) -> None:
    """Display configuration errors."""
    if not errors:
        return

    console.print(Panel(
        "\n".join(f"• {error}" for error in errors),
        title="[red]❌ Errors Found[/red]",
        border_style="red"
    ))


def display_success_message(message: str) -> None:
    """Display a success message."""
    console.print(Panel(
        f"[green]{message}[/green]",
        title="[green]✅ Success[/green]",
        border_style="green"
    ))


def format_interval(seconds: float) -> str:
    """Format an interval in seconds to human-readable format."""
    if seconds < 60:
        return f"{seconds:g}s"
    elif seconds < 3600:
        minutes, remaining = divmod(int(seconds), 60)
        return f"{minutes}m {remaining}s" if remaining else f"{minutes}m"
    else:
        hours, remaining = divmod(int(seconds), 3600)
        minutes = remaining // 60
        return f"{hours}h {minutes}m" if minutes else f"{hours}h"


def create_settings_table(config_provider: ConfigurationProvider) -> Table:
    """Create a table showing the effective monitor settings."""
    api_config = config_provider.get_twitch_api_config()
    logging_config = config_provider.get_logging_config()
    timeout = api_config.request_timeout_seconds

    table = Table(title="⚙️ Effective Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Channel", config_provider.get_channel_name())
    table.add_row("Interval", format_interval(config_provider.get_poll_interval_seconds()))
    table.add_row("Token endpoint", api_config.token_url)
    table.add_row("Users endpoint", api_config.users_url)
    table.add_row("Streams endpoint", api_config.streams_url)
    table.add_row("Request timeout", f"{timeout:g}s" if timeout else "none")
    table.add_row("Log level", logging_config.level)
    table.add_row("Log file", logging_config.file_path or "-")

    return table
