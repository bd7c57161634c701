"""Quality size command."""

import click
from rich.console import Console
from rich.table import Table

from ..app import echo_json, json_option, run_with_client, service_argument

console = Console()


@click.command()
@service_argument
@click.option("--type", "-t", "size_type", default=None, help="Media type (movie, series, anime)")
@json_option
@click.pass_context
def sizes(ctx: click.Context, service: str, size_type: str | None, json_output: bool) -> None:
    """Show recommended quality sizes.

    Examples:

        trash-guides sizes radarr

        trash-guides sizes sonarr --type anime
    """
    tables = run_with_client(ctx, lambda c: c.get_quality_sizes(service, size_type))
    if json_output:
        echo_json(tables)
        return
    if not tables:
        console.print("[yellow]No quality size tables found[/yellow]")
        return

    for size in tables:
        table = Table(title=f"{size.type} quality sizes")
        table.add_column("Quality", style="cyan")
        table.add_column("Min", justify="right")
        table.add_column("Preferred", justify="right")
        table.add_column("Max", justify="right")
        for tier in size.qualities:
            table.add_row(tier.quality, str(tier.min), str(tier.preferred), str(tier.max))
        console.print(table)
