"""Version command."""

import click
from rich.console import Console

from ... import __version__

console = Console()


@click.command()
def version() -> None:
    """Show trash-guides version."""
    console.print(f"[bold]trash-guides[/bold] v{__version__}")
