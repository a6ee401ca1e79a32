"""
Main CLI application for the CrawlKit client.

Provides one command per API operation:
- scrape, extract, search, screenshot
- linkedin, instagram, tiktok and appstore command groups
- config: view the effective configuration

Every command prints the API payload as JSON. A classified API failure is
printed with its kind, code, status and credit fields and exits with 1.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import typer
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from crawlkit import __version__
from crawlkit.client import CrawlKit
from crawlkit.config import ClientSettings, Settings, get_default_config_path, load_config
from crawlkit.core.exceptions import APIError, CrawlKitError
from crawlkit.utils.logging import get_logger, setup_logging
from crawlkit.utils.metrics import Metrics

# Initialize Typer app
app = typer.Typer(
    name="crawlkit",
    help="CrawlKit - Scrape pages, extract data and query social platforms",
    add_completion=False,
    no_args_is_help=True,
)

linkedin_app = typer.Typer(help="LinkedIn companies and people", no_args_is_help=True)
instagram_app = typer.Typer(help="Instagram profiles and posts", no_args_is_help=True)
tiktok_app = typer.Typer(help="TikTok profiles and posts", no_args_is_help=True)
appstore_app = typer.Typer(help="Play Store and App Store listings", no_args_is_help=True)
config_app = typer.Typer(help="Configuration management", no_args_is_help=True)

app.add_typer(linkedin_app, name="linkedin")
app.add_typer(instagram_app, name="instagram")
app.add_typer(tiktok_app, name="tiktok")
app.add_typer(appstore_app, name="appstore")
app.add_typer(config_app, name="config")

console = Console()
logger = get_logger(__name__)

OPTIONS_HELP = "Endpoint options as a JSON object"


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]CrawlKit[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    config_file: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file",
        dir_okay=False,
    ),
    api_key: Optional[str] = typer.Option(
        None,
        "--api-key",
        "-k",
        help="API key (defaults to the CRAWLKIT_API_KEY environment variable)",
    ),
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        help="API base URL",
    ),
    timeout_ms: Optional[int] = typer.Option(
        None,
        "--timeout",
        "-t",
        help="Request timeout in milliseconds",
        min=1,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    CrawlKit - Scrape pages, extract data and query social platforms.

    Use 'crawlkit --help' for command list.
    """
    try:
        settings = load_config(config_file or get_default_config_path())
    except (FileNotFoundError, CrawlKitError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    overrides: dict[str, Any] = {}
    if api_key is not None:
        overrides["api_key"] = api_key
    if base_url is not None:
        overrides["base_url"] = base_url
    if timeout_ms is not None:
        overrides["timeout_ms"] = timeout_ms
    if overrides:
        try:
            client_settings = ClientSettings(**{**settings.client.model_dump(), **overrides})
        except PydanticValidationError as e:
            console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)
        settings = settings.model_copy(update={"client": client_settings})

    setup_logging(settings.logging, level="DEBUG" if verbose else None)

    ctx.obj = {"settings": settings}


def _build_client(settings: Settings) -> CrawlKit:
    """Create the API client for one command."""
    return CrawlKit.from_settings(settings)


def _parse_json_object(value: Optional[str], option_name: str) -> Optional[dict[str, Any]]:
    """Parse a JSON object passed on the command line."""
    if value is None:
        return None
    try:
        parsed = json.loads(value)
    except json.JSONDecodeError as e:
        raise typer.BadParameter(f"invalid JSON: {e}", param_hint=option_name)
    if not isinstance(parsed, dict):
        raise typer.BadParameter("expected a JSON object", param_hint=option_name)
    return parsed


def _build_params(options: Optional[str], **fields: Any) -> dict[str, Any]:
    """Build request parameters, leaving out fields that were not given."""
    params = {key: value for key, value in fields.items() if value is not None}
    parsed_options = _parse_json_object(options, "--options")
    if parsed_options is not None:
        params["options"] = parsed_options
    return params


async def _call_async(
    settings: Settings,
    operation: Callable[[CrawlKit], Awaitable[Any]],
) -> Any:
    try:
        async with _build_client(settings) as client:
            return await operation(client)
    finally:
        logger.debug(f"Request metrics: {Metrics.get().snapshot()}")


def _print_api_error(error: APIError) -> None:
    """Display a classified API failure."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    for key, value in error.to_dict().items():
        if key != "message":
            table.add_row(key, escape(str(value)))

    console.print(f"[red]Error:[/red] {escape(error.message)}")
    console.print(table)


def _run(ctx: typer.Context, operation: Callable[[CrawlKit], Awaitable[Any]]) -> None:
    """Run one API operation and print its payload as JSON."""
    settings: Settings = ctx.obj["settings"]

    try:
        result = asyncio.run(_call_async(settings, operation))
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        raise typer.Exit(1)
    except APIError as e:
        logger.debug(f"Command failed: {e!r}")
        _print_api_error(e)
        raise typer.Exit(1)
    except CrawlKitError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print_json(data=result)


# Page-level commands


@app.command()
def scrape(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to scrape"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """
    Scrape a URL and print markdown, HTML and metadata.

    Example:
        crawlkit scrape https://example.com
    """
    params = _build_params(options, url=url)
    _run(ctx, lambda client: client.scrape(params))


@app.command()
def extract(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to extract from"),
    schema: str = typer.Option(..., "--schema", "-s", help="JSON Schema describing the data"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """
    Extract structured data from a URL using a JSON Schema.

    Example:
        crawlkit extract https://example.com/product --schema '{"type": "object"}'
    """
    parsed_schema = _parse_json_object(schema, "--schema")
    params = _build_params(options, url=url, schema=parsed_schema)
    _run(ctx, lambda client: client.extract(params))


@app.command()
def search(
    ctx: typer.Context,
    query: str = typer.Argument(..., help="Search query"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Search the web."""
    params = _build_params(options, query=query)
    _run(ctx, lambda client: client.search(params))


@app.command()
def screenshot(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="URL to capture"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Take a full-page screenshot of a URL."""
    params = _build_params(options, url=url)
    _run(ctx, lambda client: client.screenshot(params))


# LinkedIn


@linkedin_app.command("company")
def linkedin_company(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="LinkedIn company URL"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Scrape a LinkedIn company page."""
    params = _build_params(options, url=url)
    _run(ctx, lambda client: client.linkedin.company(params))


@linkedin_app.command("person")
def linkedin_person(
    ctx: typer.Context,
    urls: list[str] = typer.Argument(..., help="One or more LinkedIn profile URLs"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Scrape one or more LinkedIn person profiles."""
    params = _build_params(options, url=urls[0] if len(urls) == 1 else urls)
    _run(ctx, lambda client: client.linkedin.person(params))


# Instagram


@instagram_app.command("profile")
def instagram_profile(
    ctx: typer.Context,
    username: str = typer.Argument(..., help="Username (without @) or profile URL"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Scrape an Instagram profile."""
    params = _build_params(options, username=username)
    _run(ctx, lambda client: client.instagram.profile(params))


@instagram_app.command("content")
def instagram_content(
    ctx: typer.Context,
    shortcode: str = typer.Argument(..., help="Post shortcode or URL"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Scrape an Instagram post or reel."""
    params = _build_params(options, shortcode=shortcode)
    _run(ctx, lambda client: client.instagram.content(params))


# TikTok


@tiktok_app.command("profile")
def tiktok_profile(
    ctx: typer.Context,
    username: str = typer.Argument(..., help="Username, with or without @"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Scrape a TikTok profile."""
    params = _build_params(options, username=username)
    _run(ctx, lambda client: client.tiktok.profile(params))


@tiktok_app.command("post")
def tiktok_post(
    ctx: typer.Context,
    url: str = typer.Argument(..., help="TikTok post URL"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Scrape a single TikTok post."""
    params = _build_params(options, url=url)
    _run(ctx, lambda client: client.tiktok.content(params))


@tiktok_app.command("posts")
def tiktok_posts(
    ctx: typer.Context,
    username: str = typer.Argument(..., help="Username, with or without @"),
    cursor: Optional[int] = typer.Option(None, "--cursor", help="Cursor from the previous page"),
    sec_uid: Optional[str] = typer.Option(None, "--sec-uid", help="secUid from the previous page"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """
    List a TikTok user's posts.

    Example:
        crawlkit tiktok posts nike --cursor 1700000000000 --sec-uid MS4wLjAB...
    """
    params = _build_params(options, username=username, cursor=cursor, secUid=sec_uid)
    _run(ctx, lambda client: client.tiktok.posts(params))


# App stores


@appstore_app.command("playstore-reviews")
def playstore_reviews(
    ctx: typer.Context,
    app_id: str = typer.Argument(..., help="Play Store app ID (e.g. com.example.app)"),
    cursor: Optional[str] = typer.Option(None, "--cursor", help="Cursor from the previous page"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Fetch Google Play Store reviews."""
    params = _build_params(options, appId=app_id, cursor=cursor)
    _run(ctx, lambda client: client.appstore.playstore_reviews(params))


@appstore_app.command("playstore-detail")
def playstore_detail(
    ctx: typer.Context,
    app_id: str = typer.Argument(..., help="Play Store app ID (e.g. com.example.app)"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Fetch Google Play Store app details."""
    params = _build_params(options, appId=app_id)
    _run(ctx, lambda client: client.appstore.playstore_detail(params))


@appstore_app.command("appstore-detail")
def appstore_detail(
    ctx: typer.Context,
    app_id: str = typer.Argument(..., help="App Store numeric ID or URL"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Fetch iOS App Store app details."""
    params = _build_params(options, appId=app_id)
    _run(ctx, lambda client: client.appstore.appstore_detail(params))


@appstore_app.command("appstore-reviews")
def appstore_reviews(
    ctx: typer.Context,
    app_id: str = typer.Argument(..., help="App Store numeric ID"),
    cursor: Optional[str] = typer.Option(None, "--cursor", help="Cursor from the previous page"),
    options: Optional[str] = typer.Option(None, "--options", "-o", help=OPTIONS_HELP),
) -> None:
    """Fetch iOS App Store reviews."""
    params = _build_params(options, appId=app_id, cursor=cursor)
    _run(ctx, lambda client: client.appstore.appstore_reviews(params))


# Configuration


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    settings: Settings = ctx.obj["settings"]
    config_dict = settings.model_dump(mode="json")

    # Never echo the key itself
    client_section = config_dict["client"]
    if settings.client.resolve_api_key():
        client_section["api_key"] = "ck_****"

    console.print(Panel(
        "[bold]Current Configuration[/bold]",
        border_style="blue",
    ))

    for section, values in config_dict.items():
        console.print(f"\n[bold cyan]{section}:[/bold cyan]")
        for key, value in values.items():
            console.print(f"  {key}: [dim]{escape(str(value))}[/dim]")


if __name__ == "__main__":
    app()
