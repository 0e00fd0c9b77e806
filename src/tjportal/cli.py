"""
tjportal CLI.

Usage:
    tjportal list
    tjportal show production --json
    tjportal url development /us/users/me
"""

from __future__ import annotations

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tjportal.config import get_settings
from tjportal.environments import get_config, iter_configs
from tjportal.exceptions import TJPortalError
from tjportal.logging import configure_logging
from tjportal.models.endpoint import EndpointConfig

console = Console()
err_console = Console(stderr=True)


def lookup(environment: str) -> EndpointConfig:
    """Resolve an environment or exit with an error message."""
    try:
        return get_config(environment)
    except TJPortalError as e:
        err_console.print(f"[red]Error:[/red] {escape(e.message)}")
        raise SystemExit(1)


def _display(value: str) -> str:
    return escape(value) if value else "[dim](empty)[/dim]"


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override TJPORTAL_LOG_LEVEL",
)
@click.version_option(package_name="tjportal")
def main(log_level: str | None) -> None:
    """tjportal endpoint configuration."""
    settings = get_settings()
    configure_logging(log_level or settings.log_level, json_format=settings.log_json)


# =============================================================================
# List Command
# =============================================================================


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of a table")
def list_(as_json: bool) -> None:
    """List all environments with their endpoints."""
    entries = list(iter_configs())

    if as_json:
        data = {env.value: config.model_dump() for env, config in entries}
        click.echo(json.dumps(data, indent=2))
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Environment", style="cyan")
    table.add_column("Host")
    table.add_column("CDN")

    for env, config in entries:
        table.add_row(env.value, _display(config.host), _display(config.cdn))

    console.print(table)


# =============================================================================
# Show Command
# =============================================================================


@main.command()
@click.argument("environment")
@click.option("--json", "as_json", is_flag=True, help="Print JSON instead of text")
def show(environment: str, as_json: bool) -> None:
    """Show endpoints for one environment.

    Examples:

        tjportal show development

        tjportal show product --json
    """
    config = lookup(environment)

    if as_json:
        click.echo(config.model_dump_json(indent=2))
        return

    console.print(f"[dim]Host:[/dim] {_display(config.host)}")
    console.print(f"[dim]CDN:[/dim]  {_display(config.cdn)}")


# =============================================================================
# URL Command
# =============================================================================


@main.command()
@click.argument("environment")
@click.argument("path")
@click.option("--asset", is_flag=True, help="Build a static asset URL from the CDN path")
def url(environment: str, path: str, asset: bool) -> None:
    """Build a full URL for PATH in ENVIRONMENT.

    Examples:

        tjportal url development /us/users/me

        tjportal url production img/logo.png --asset
    """
    config = lookup(environment)
    click.echo(config.asset_url(path) if asset else config.api_url(path))


# =============================================================================
# Entry Point
# =============================================================================


if __name__ == "__main__":
    main()
