"""Quality profile commands."""

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
def profiles(ctx: click.Context, service: str, name: str | None, json_output: bool) -> None:
    """List quality profiles, or show one profile in detail.

    Examples:

        trash-guides profiles radarr

        trash-guides profiles sonarr web-1080p --json
    """
    if name is None:
        summaries = run_with_client(ctx, lambda c: c.list_profiles(service))
        if json_output:
            echo_json(summaries)
            return
        table = Table(title=f"{service.capitalize()} quality profiles")
        table.add_column("Name", style="cyan")
        table.add_column("Description")
        for summary in summaries:
            table.add_row(summary.name, summary.description or "-")
        console.print(table)
        return

    profile = run_with_client(ctx, lambda c: c.get_profile(service, name))
    if profile is None:
        console.print(f"[red]Profile not found: {name}[/red]")
        raise SystemExit(1)
    if json_output:
        echo_json(profile)
        return

    console.print(f"[bold]{profile.name}[/bold]")
    if profile.description:
        console.print(f"[dim]{profile.description}[/dim]")
    console.print(f"Cutoff: {profile.cutoff}  Upgrades: {'yes' if profile.upgrade_allowed else 'no'}")
    console.print(
        f"Scores: min {profile.min_format_score}, cutoff {profile.cutoff_format_score}, "
        f"min upgrade {profile.min_upgrade_format_score}"
    )

    table = Table(title="Qualities")
    table.add_column("Quality", style="cyan")
    table.add_column("Allowed")
    table.add_column("Contains")
    for item in profile.items:
        allowed = "[green]✓[/green]" if item.allowed else "[red]✗[/red]"
        table.add_row(item.name, allowed, ", ".join(item.items) or "-")
    console.print(table)
