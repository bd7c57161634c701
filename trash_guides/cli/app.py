"""trash-guides CLI application."""

import asyncio
import dataclasses
import json
from typing import Any, Awaitable, Callable, TypeVar

import click
import yaml
from rich.console import Console
from rich.markup import escape

from .. import __version__
from ..client import TrashClient
from ..config import TrashConfig, find_config
from ..errors import NetworkError
from ..utils.logging import setup_logging

console = Console()

T = TypeVar("T")


def service_argument(f):
    """Shared SERVICE argument for subcommands."""
    return click.argument(
        "service",
        type=click.Choice(["radarr", "sonarr"], case_sensitive=False),
    )(f)


def json_option(f):
    """Shared --json flag for subcommands."""
    return click.option("--json", "json_output", is_flag=True, help="JSON output format")(f)


@click.group()
@click.version_option(version=__version__, prog_name="trash-guides")
@click.option("--config", "-c", type=click.Path(exists=True), help="Config file path")
@click.option("--no-config", is_flag=True, help="Disable config auto-loading")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--debug", is_flag=True, help="Debug logging")
@click.pass_context
def cli(ctx: click.Context, config: str, no_config: bool, verbose: bool, debug: bool) -> None:
    """Browse TRaSH Guides profiles, custom formats and naming schemes.

    Config file locations (in priority order):

        1. -c/--config PATH (explicit)

        2. TRASH_GUIDES_CONFIG env var

        3. .trash-guides.yaml (project config)

        4. ~/.config/trash-guides/config.yaml (user config)

    Examples:

        trash-guides profiles radarr

        trash-guides formats sonarr --category hdr

        trash-guides sizes radarr --type movie
    """
    ctx.ensure_object(dict)

    if no_config:
        config = None
    elif config is None:
        config = find_config()
        if config and verbose:
            console.print(f"[dim]Using config: {config}[/dim]")

    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug


def load_config(ctx: click.Context) -> TrashConfig:
    """Build the TrashConfig for a command and set up logging."""
    obj = ctx.obj or {}
    path = obj.get("config")
    try:
        config = TrashConfig.load(path) if path else TrashConfig()
    except (ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid config {escape(str(path))}: {escape(str(e))}[/red]")
        raise SystemExit(1)

    if obj.get("debug"):
        config.log_level = "DEBUG"
        setup_logging(config)
    elif obj.get("verbose"):
        setup_logging(config)
    return config


def run_with_client(ctx: click.Context, func: Callable[[TrashClient], Awaitable[T]]) -> T:
    """Run ``func`` against a fresh client; network errors exit with status 1."""
    config = load_config(ctx)

    async def _run() -> T:
        async with TrashClient(config) as client:
            return await func(client)

    try:
        return asyncio.run(_run())
    except NetworkError as e:
        if (ctx.obj or {}).get("debug"):
            console.print_exception()
        else:
            console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1)


def echo_json(data: Any) -> None:
    """Print dataclasses (or lists of them) as indented JSON."""
    if dataclasses.is_dataclass(data):
        data = dataclasses.asdict(data)
    elif isinstance(data, list):
        data = [dataclasses.asdict(d) if dataclasses.is_dataclass(d) else d for d in data]
    click.echo(json.dumps(data, indent=2))


# Import and register commands
from .commands import categorize, formats, groups, naming, profiles, sizes, version  # noqa: E402

cli.add_command(profiles.profiles)
cli.add_command(formats.formats)
cli.add_command(groups.groups)
cli.add_command(naming.naming)
cli.add_command(sizes.sizes)
cli.add_command(categorize.categorize)
cli.add_command(version.version)
