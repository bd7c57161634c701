"""Custom format commands."""

import click
from rich.console import Console
from rich.table import Table

from ..app import echo_json, json_option, run_with_client, service_argument

console = Console()


@click.command()
@service_argument
@click.argument("name", required=False)
@click.option("--category", "-k", default=None, help="Only formats in this category (hdr, audio, ...)")
@json_option
@click.pass_context
def formats(
    ctx: click.Context,
    service: str,
    name: str | None,
    category: str | None,
    json_output: bool,
) -> None:
    """List custom formats, or show one custom format.

    Examples:

        trash-guides formats radarr

        trash-guides formats radarr --category hdr

        trash-guides formats sonarr dv-hdr10plus --json
    """
    if name is None:
        summaries = run_with_client(ctx, lambda c: c.list_custom_formats(service, category))
        if json_output:
            echo_json(summaries)
            return
        title = f"{service.capitalize()} custom formats"
        if category:
            title += f" ({category})"
        table = Table(title=title)
        table.add_column("Name", style="cyan")
        table.add_column("Categories")
        table.add_column("Score", justify="right")
        for summary in summaries:
            score = "-" if summary.default_score is None else str(summary.default_score)
            table.add_row(summary.name, ", ".join(summary.categories), score)
        console.print(table)
        return

    cf = run_with_client(ctx, lambda c: c.get_custom_format(service, name))
    if cf is None:
        console.print(f"[red]Custom format not found: {name}[/red]")
        raise SystemExit(1)
    if json_output:
        echo_json(cf)
        return

    console.print(f"[bold]{cf.name}[/bold]  [dim]{cf.trash_id}[/dim]")
    if cf.default_score is not None:
        console.print(f"Default score: {cf.default_score}")
    table = Table(title="Specifications")
    table.add_column("Name", style="cyan")
    table.add_column("Implementation")
    table.add_column("Negate")
    table.add_column("Required")
    for spec in cf.specifications:
        table.add_row(spec.name, spec.implementation, str(spec.negate), str(spec.required))
    console.print(table)
