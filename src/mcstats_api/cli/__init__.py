"""Command line extensions for the ``litestar`` CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING

from litestar.plugins import CLIPluginProtocol

from mcstats_api.cli.commands import stats_group

if TYPE_CHECKING:
    import rich_click as click


class McStatsCLIPlugin(CLIPluginProtocol):
    """CLI plugin that adds the ``stats`` command group.

    Subcommands:
    - players: Show a summary for every player in the roster
    - status: Probe the game server once
    """

    def on_cli_init(self, cli: click.Group) -> None:
        """Register the stats command group."""
        cli.add_command(stats_group)


__all__ = ["McStatsCLIPlugin", "stats_group"]
