"""Main CLI interface for YouTube Stats."""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path

import click
import uvicorn
from rich.console import Console
from rich.panel import Panel

from youtube_stats import __version__
from youtube_stats.application.use_cases.validate_config import ValidateConfigUseCase
from youtube_stats.cli.utils import (
    create_statistics_table,
    display_error_summary,
    display_success_message,
)
from youtube_stats.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    YouTubeStatsError,
)
from youtube_stats.infrastructure.container import (
    create_container,
    get_auth_manager,
    get_configuration_provider,
    get_statistics_service,
)
from youtube_stats.infrastructure.logging_config import setup_logging
from youtube_stats.web.app import create_app

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="YouTube Stats")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to YAML configuration file (environment variables are used when omitted)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output",
)
@click.pass_context
def cli(ctx: click.Context, config: Path | None, verbose: bool) -> None:
    """
    YouTube Stats - serve a YouTube channel's statistics over HTTP.

    Authenticates to the YouTube Data API with a Google service account and
    reports the subscriber and view counts of a channel.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["verbose"] = verbose

    if verbose:
        source = config if config else "environment variables"
        console.print(f"[dim]Using configuration: {source}[/dim]")


@cli.command()
@click.option("--host", default=None, help="Interface to bind (overrides configuration)")
@click.option("--port", type=int, default=None, help="Port to listen on (overrides configuration)")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the statistics HTTP server."""
    config_path = ctx.obj["config_path"]
    verbose = ctx.obj["verbose"]

    try:
        container = create_container(config_path)
        config_provider = get_configuration_provider(container)
        setup_logging(config_provider.get_logging_config(), verbose=verbose)
        server = config_provider.get_server_settings()
        app = create_app(container)
    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {e}")
        sys.exit(1)

    bind_host = host or server.host
    bind_port = port or server.port
    console.print(
        f"[green]Serving statistics on http://{bind_host}:{bind_port}{server.route_path}[/green]"
    )
    uvicorn.run(app, host=bind_host, port=bind_port, log_config=None)


@cli.command()
@click.argument("channel_id", required=False)
@click.option("--json", "as_json", is_flag=True, help="Print the JSON body served by the route")
@click.pass_context
def stats(ctx: click.Context, channel_id: str | None, as_json: bool) -> None:
    """Fetch statistics for CHANNEL_ID (or the configured channel)."""
    config_path = ctx.obj["config_path"]
    verbose = ctx.obj["verbose"]

    try:
        container = create_container(config_path)
        service = get_statistics_service(container)
        statistics = asyncio.run(service.get_statistics(channel_id))
    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {e}")
        sys.exit(1)
    except AuthenticationError as e:
        console.print(f"[red]❌ Authentication Error:[/red] {e}")
        console.print(
            "\n[yellow]💡 Tip:[/yellow] Check that the YouTube Data API is enabled "
            "for the service account's project."
        )
        sys.exit(1)
    except YouTubeStatsError as e:
        console.print(f"[red]❌ Error:[/red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]❌ Unexpected Error:[/red] {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(statistics.to_response()))
    else:
        console.print(create_statistics_table(statistics))


@cli.command()
@click.option("--check-auth", is_flag=True, help="Also request an access token from Google")
@click.pass_context
def validate(ctx: click.Context, check_auth: bool) -> None:
    """Validate configuration and, optionally, credentials."""
    config_path = ctx.obj["config_path"]

    console.print(Panel(
        "[blue]🔍 Configuration Validation[/blue]\n"
        "Checking channel, credentials, scopes and settings...",
        title="Validation",
        border_style="blue"
    ))

    try:
        container = create_container(config_path)
    except ConfigurationError as e:
        console.print(f"[red]❌ Configuration Error:[/red] {e}")
        sys.exit(1)

    use_case = ValidateConfigUseCase(
        get_configuration_provider(container),
        get_auth_manager(container),
    )
    errors = use_case.execute()
    if check_auth and not errors:
        auth_error = use_case.validate_api_connectivity()
        if auth_error:
            errors.append(auth_error)

    if errors:
        display_error_summary(errors)
        sys.exit(1)

    display_success_message("Configuration is valid")


@cli.group()
def auth() -> None:
    """Authentication commands."""
    pass


@auth.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Check service account authentication status."""
    config_path = ctx.obj["config_path"]
    verbose = ctx.obj["verbose"]

    try:
        container = create_container(config_path)
        auth_manager = get_auth_manager(container)
        email = auth_manager.get_service_account_email()
        console.print(f"Service account: [cyan]{email}[/cyan]")

        if auth_manager.is_authenticated:
            console.print("[green]✅ Authenticated[/green]")
        else:
            console.print("[red]❌ Not authenticated[/red]")
            sys.exit(1)

    except YouTubeStatsError as e:
        console.print(f"[red]❌ Error checking authentication:[/red] {e}")
        _show_auth_help()
        if verbose:
            console.print_exception()
        sys.exit(1)


def _show_auth_help() -> None:
    """Show service account setup steps."""
    console.print(Panel(
        "[yellow]Service account setup:[/yellow]\n\n"
        "1. Go to Google Cloud Console (console.cloud.google.com)\n"
        "2. Create a new project or select existing project\n"
        "3. Enable the YouTube Data API v3\n"
        "4. Create a service account and add a JSON key\n"
        "5. Export GOOGLE_PRIVATE_KEY, GOOGLE_CLIENT_EMAIL and GOOGLE_CLIENT_ID\n"
        "   from the key, or set credentials_file in your config.yml\n"
        "6. Optionally grant domain-wide delegation and set GOOGLE_DELEGATED_SUBJECT",
        title="Setup Help",
        border_style="yellow"
    ))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
