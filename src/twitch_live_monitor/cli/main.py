"""Main CLI interface for Twitch Live Monitor."""

from __future__ import annotations

import asyncio
import logging
import sys
from functools import partial
from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel

from twitch_live_monitor import __version__
from twitch_live_monitor.application.use_cases.validate_config import ValidateConfigUseCase
from twitch_live_monitor.domain.exceptions import ConfigurationError
from twitch_live_monitor.domain.models.credentials import Credentials
from twitch_live_monitor.infrastructure.config.env import load_credentials
from twitch_live_monitor.infrastructure.config.models import LoggingConfig
from twitch_live_monitor.infrastructure.container import (
    Container,
    create_container,
    get_configuration_provider,
    get_scheduler,
)
from twitch_live_monitor.infrastructure.logging_setup import configure_logging
from twitch_live_monitor.infrastructure.reporting import ConsoleStatusReporter

console = Console()
logger = logging.getLogger(__name__)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="Twitch Live Monitor")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Path to YAML configuration file (built-in defaults when omitted)",
)
@click.option(
    "--env-file",
    "-e",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Environment file with CLIENT_ID and CLIENT_SECRET [default: ./.env]",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(ctx: click.Context, config: Path | None, env_file: Path | None, verbose: bool) -> None:
    """
    Twitch Live Monitor - polls Twitch to report whether a channel is live.

    Without a command, monitors the configured channel every interval until
    interrupted (same as `run`).
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["env_file"] = env_file
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option("--channel", help="Channel login to monitor (overrides configuration)")
@click.option(
    "--interval",
    type=click.FloatRange(min=0, min_open=True),
    help="Seconds between checks (overrides configuration)",
)
@click.pass_context
def run(ctx: click.Context, channel: str | None, interval: float | None) -> None:
    """Check the channel now, then on every interval until interrupted."""
    container, credentials = _bootstrap(ctx, channel=channel, interval=interval)
    scheduler = get_scheduler(container, credentials, ConsoleStatusReporter(console))

    try:
        asyncio.run(scheduler.run())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")


@cli.command()
@click.option("--channel", help="Channel login to check (overrides configuration)")
@click.pass_context
def check(ctx: click.Context, channel: str | None) -> None:
    """Check the channel once and exit (status 1 if the check failed)."""
    container, credentials = _bootstrap(ctx, channel=channel)
    scheduler = get_scheduler(container, credentials, ConsoleStatusReporter(console))

    result = asyncio.run(scheduler.run_once())
    if result is None or not result.is_success:
        sys.exit(1)


@cli.command()
@click.pass_context
def validate(ctx: click.Context) -> None:
    """Validate configuration and credentials without calling Twitch."""
    from twitch_live_monitor.cli.utils import (
        create_settings_table,
        display_error_summary,
        display_success_message,
    )

    config_path = ctx.obj["config_path"]
    env_file = ctx.obj["env_file"]
    verbose = ctx.obj["verbose"]

    console.print(Panel(
        "[blue]🔍 Configuration Validation[/blue]\n"
        "Checking configuration file and credentials...",
        title="Validation",
        border_style="blue"
    ))

    try:
        container = create_container(config_path)
        config_provider = get_configuration_provider(container)
    except ConfigurationError as e:
        console.print(f"\n[red]❌ Configuration Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[red]❌ Validation failed:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    console.print(create_settings_table(config_provider))

    errors = ValidateConfigUseCase(config_provider).execute(
        credentials_loader=partial(load_credentials, env_file)
    )
    if errors:
        display_error_summary(errors)
        sys.exit(1)

    display_success_message("Configuration and credentials look good!")


def _bootstrap(
    ctx: click.Context,
    channel: str | None = None,
    interval: float | None = None,
) -> tuple[Container, Credentials]:
    """
    Load configuration, logging and credentials.

    Any configuration problem is fatal: it is logged and the process exits
    with status 1 before any network call is made.
    """
    verbose = ctx.obj["verbose"]
    configure_logging(LoggingConfig(), verbose)

    try:
        container = create_container(ctx.obj["config_path"])
        config_provider = get_configuration_provider(container)
        config_provider.override(
            "monitor", channel_name=channel, poll_interval_seconds=interval
        )
        configure_logging(config_provider.get_logging_config(), verbose)
        credentials = load_credentials(ctx.obj["env_file"])
    except ConfigurationError as e:
        logger.critical(f"Configuration Error: {e}")
        sys.exit(1)

    logger.debug(f"Loaded {credentials}")
    return container, credentials


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
