"""Offline categorization command."""

import click
from rich.console import Console
from rich.table import Table

from ...categorizer import categorize as categorize_name
from ..app import echo_json, json_option

console = Console()


@click.command()
@click.argument("names", nargs=-1, required=True)
@json_option
def categorize(names: tuple[str, ...], json_output: bool) -> None:
    """Show the categories custom format names fall into.

    Examples:

        trash-guides categorize "Dolby Vision HDR10+" "TrueHD ATMOS"
    """
    results = {name: categorize_name(name) for name in names}
    if json_output:
        echo_json(results)
        return

    table = Table()
    table.add_column("Name", style="cyan")
    table.add_column("Categories")
    for name, tags in results.items():
        table.add_row(name, ", ".join(tags))
    console.print(table)
