"""CLI commands for inspecting player statistics and server status.

Both commands read the same sources as the HTTP API, configured through the
``MCSTATS_*`` environment variables.
"""

from __future__ import annotations

import asyncio

import rich_click as click
from rich.console import Console
from rich.table import Table

from mcstats_api.config import McStatsSettings
from mcstats_api.exceptions import MalformedRecordError
from mcstats_api.services.players import PlayerService
from mcstats_api.services.status import StatusService
from mcstats_api.storage.filesystem import FileSystemStorage

console = Console()


def _format_hours(ticks: int) -> str:
    # 20 ticks per second
    return f"{ticks / 20 / 3600:.1f}h"


def _format_km(distance_cm: int) -> str:
    return f"{distance_cm / 100_000:.2f} km"


@click.group(name="stats", help="Inspect player statistics and game server status.")
def stats_group() -> None:
    """Inspect player statistics and game server status."""


@stats_group.command(name="players", help="Show a summary for every player in the roster.")
@click.option("--skip-malformed", is_flag=True, default=False, help="Skip players with unreadable files")
def stats_players(skip_malformed: bool) -> None:
    """Show a summary for every player in the roster."""
    settings = McStatsSettings()
    service = PlayerService(
        FileSystemStorage.from_settings(settings),
        skip_malformed=skip_malformed or settings.skip_malformed,
    )

    try:
        summaries = service.list_summaries()
    except MalformedRecordError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise SystemExit(1) from e

    table = Table(title=f"Players ({len(summaries)})")
    table.add_column("Name", style="cyan")
    table.add_column("Playtime", justify="right", style="green")
    table.add_column("Deaths", justify="right", style="red")
    table.add_column("Distance", justify="right")
    table.add_column("Pig", justify="right", style="magenta")
    table.add_column("Diet", style="yellow")
    table.add_column("Bells", justify="right")
    table.add_column("Advancements", justify="right", style="dim")

    for summary in summaries:
        table.add_row(
            summary.name,
            _format_hours(summary.playtime_ticks),
            str(summary.deaths),
            _format_km(summary.total_distance_cm),
            _format_km(summary.pig_distance_cm),
            summary.diet.value,
            str(summary.bell_rings),
            str(len(summary.advancement_names)),
        )

    console.print(table)


@stats_group.command(name="status", help="Probe the game server once.")
def stats_status() -> None:
    """Probe the game server once."""
    settings = McStatsSettings()
    service = StatusService.from_settings(settings)

    console.print(f"[cyan]Probing {settings.server_address}:{settings.server_port}...[/cyan]")
    status = asyncio.run(service.probe())

    if not status.online:
        console.print("[red]Server offline[/red]")
        return

    console.print(f"[green]Server online:[/green] {status.player_count}/{status.max_players} players")
    if status.online_names:
        console.print(", ".join(status.online_names))
