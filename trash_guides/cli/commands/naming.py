"""Naming scheme command."""

import click
from rich.console import Console
from rich.table import Table

from ..app import echo_json, json_option, run_with_client, service_argument

console = Console()


@click.command()
@service_argument
@json_option
@click.pass_context
def naming(ctx: click.Context, service: str, json_output: bool) -> None:
    """Show recommended folder and file naming schemes.

    Examples:

        trash-guides naming sonarr
    """
    scheme = run_with_client(ctx, lambda c: c.get_naming(service))
    if scheme is None:
        console.print(f"[red]Naming scheme unavailable for {service}[/red]")
        raise SystemExit(1)
    if json_output:
        echo_json(scheme)
        return

    sections = {
        "folder": scheme.folder,
        "file": scheme.file,
        "season": scheme.season,
        "series": scheme.series,
        "specials": scheme.specials,
    }
    for title, entries in sections.items():
        if not entries:
            continue
        table = Table(title=title.capitalize())
        table.add_column("Variant", style="cyan")
        table.add_column("Format")
        for variant, fmt in entries.items():
            table.add_row(variant, fmt)
        console.print(table)
