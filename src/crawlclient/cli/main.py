"""crawlclient CLI main entry point.

One-off fetches through the authenticating client, plus configuration
inspection.
"""

from pathlib import Path
from typing import Optional

import click
import requests
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..config import ConfigManager, CrawlClientConfig, LoggingSettings
from ..exceptions import ConfigurationError, CrawlClientError
from ..http import create_client
from ..logging import get_logger
from ..logging_integration import configure_logging_from_settings

console = Console()

VERBOSITY_LEVELS = {0: None, 1: "INFO", 2: "DEBUG"}


def report_error(title: str, e: CrawlClientError) -> None:
    """Print an error with its guidance, then log its structured form."""
    console.print(f"[red]{title}:[/red] {escape(e.message)}")
    if e.help_text:
        console.print(f"[dim]Help: {escape(e.help_text)}[/dim]")
    if e.user_action:
        console.print(f"[dim]Action: {escape(e.user_action)}[/dim]")
    if e.technical_details:
        console.print(f"[dim]Details: {escape(e.technical_details)}[/dim]")
    console.print(f"[dim]Error ID: {e.correlation_id}[/dim]")

    get_logger("crawlclient.cli").error(title, error_dict=e.to_dict())


def setup_logging(manager: ConfigManager, verbose: int) -> None:
    """Set up logging from the configuration, or from defaults if it won't load.

    Load errors are reported by the commands that read the configuration.
    """
    try:
        logging_settings = manager.load_config().logging
    except ConfigurationError:
        logging_settings = LoggingSettings()

    configure_logging_from_settings(
        logging_settings,
        level_override=VERBOSITY_LEVELS.get(min(verbose, 2)),
        service_name="crawlclient-cli",
    )


def load_config(ctx: click.Context) -> CrawlClientConfig:
    """Load configuration once per invocation, exiting cleanly on errors."""
    manager: ConfigManager = ctx.obj["config_manager"]
    try:
        return manager.load_config()
    except ConfigurationError as e:
        report_error("Configuration error", e)
        ctx.exit(2)


@click.group()
@click.version_option(version=__version__, prog_name="crawlclient")
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file path (created by 'config --init' if missing)",
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)",
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """crawlclient: HTTP fetches with Basic auth challenge handling.

    \b
    Examples:
        crawlclient fetch https://example.com/
        crawlclient fetch https://intranet.local/ -u alice -p secret
        crawlclient fetch https://example.com/old --no-follow --show-headers
        crawlclient config --show
    """
    ctx.ensure_object(dict)
    manager = ConfigManager(config)
    ctx.obj["config_manager"] = manager
    setup_logging(manager, verbose)


@cli.command()
@click.argument("url")
@click.option("--user-agent", "-A", help="Override the User-Agent header")
@click.option("--username", "-u", help="HTTP Basic username")
@click.option("--password", "-p", help="HTTP Basic password")
@click.option("--no-follow", is_flag=True, help="Do not follow redirects")
@click.option("--show-headers", "-i", is_flag=True, help="Print response headers")
@click.pass_context
def fetch(
    ctx: click.Context,
    url: str,
    user_agent: Optional[str],
    username: Optional[str],
    password: Optional[str],
    no_follow: bool,
    show_headers: bool,
) -> None:
    """Fetch URL once, retrying with credentials on a Basic challenge."""
    logger = get_logger("crawlclient.cli").with_context(url=url)
    http_config = load_config(ctx).http

    overrides = {}
    if user_agent:
        overrides["user_agent"] = user_agent
    if username is not None:
        overrides["username"] = username
    if password is not None:
        overrides["password"] = password
    if no_follow:
        overrides["follow_redirects"] = False
    if overrides:
        http_config = http_config.model_copy(update=overrides)

    logger.debug(
        "Fetching",
        user_agent=http_config.user_agent,
        follow_redirects=http_config.follow_redirects,
        has_credentials=http_config.has_credentials,
    )
    with create_client(http_config) as client:
        try:
            response = client.request_url(url)
        except requests.RequestException as e:
            logger.error("Request failed", error_type=type(e).__name__, error=str(e))
            console.print(f"[red]Request failed:[/red] {escape(str(e))}")
            ctx.exit(1)

    style = "green" if response.ok else "yellow" if response.is_redirect else "red"
    console.print(f"[{style}]{response.status_code} {escape(response.reason or '')}[/{style}] {escape(response.url or '')}")
    for hop in response.history:
        console.print(f"  via {hop.status_code} {escape(hop.url)}")

    if show_headers:
        table = Table(show_header=True, header_style="bold")
        table.add_column("Header")
        table.add_column("Value")
        for name, value in response.headers.items():
            table.add_row(escape(name), escape(value))
        console.print(table)

    console.print(f"{len(response.content)} bytes")


@cli.command()
@click.option("--show", "show", is_flag=True, help="Print the effective configuration")
@click.option("--init", "init", is_flag=True, help="Write a default configuration file")
@click.option("--force", is_flag=True, help="Overwrite an existing file with --init")
@click.pass_context
def config(ctx: click.Context, show: bool, init: bool, force: bool) -> None:
    """Show or initialise the configuration."""
    manager: ConfigManager = ctx.obj["config_manager"]

    if init:
        if manager.config_file.exists() and not force:
            console.print(
                f"[yellow]{escape(str(manager.config_file))} already exists; use --force to overwrite[/yellow]"
            )
            ctx.exit(1)
        path = manager.save_config(CrawlClientConfig())
        console.print(f"Wrote default configuration to {path}")
        return

    if not show:
        click.echo(ctx.get_help())
        return

    settings = load_config(ctx)
    data = settings.model_dump(mode="json")
    if data["http"].get("password"):
        data["http"]["password"] = "********"

    table = Table(show_header=True, header_style="bold")
    table.add_column("Setting")
    table.add_column("Value")
    for section, values in data.items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", escape(str(value)))
    console.print(table)


def main() -> None:
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
