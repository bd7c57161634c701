"""Custom format group commands."""

import click
from rich.console import Console
from rich.table import Table

from ..app import echo_json, json_option, run_with_client, service_argument

console = Console()


@click.command()
@service_argument
@click.argument("name", required=False)
@json_option
@click.pass_context
def groups(ctx: click.Context, service: str, name: str | None, json_output: bool) -> None:
    """List custom format groups, or show the members of one group.

    Examples:

        trash-guides groups radarr

        trash-guides groups radarr hdr-formats
    """
    if name is None:
        names = run_with_client(ctx, lambda c: c.list_cf_groups(service))
        if json_output:
            echo_json(names)
        else:
            for group_name in names:
                console.print(group_name)
        return

    group = run_with_client(ctx, lambda c: c.get_cf_group(service, name))
    if group is None:
        console.print(f"[red]CF group not found: {name}[/red]")
        raise SystemExit(1)
    if json_output:
        echo_json(group)
        return

    console.print(f"[bold]{group.name}[/bold]")
    if group.description:
        console.print(f"[dim]{group.description}[/dim]")
    table = Table(title="Custom formats")
    table.add_column("Name", style="cyan")
    table.add_column("Required")
    for member in group.custom_formats:
        table.add_row(member.name, "[green]✓[/green]" if member.required else "")
    console.print(table)
    if group.exclude_profiles:
        console.print(f"Not for: {', '.join(group.exclude_profiles)}")
