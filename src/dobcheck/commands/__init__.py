"""Subcommand modules for dobcheck.

``register_commands()`` imports command modules lazily so
``dobcheck --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups on the root CLI group."""
    from dobcheck.commands.bench import bench
    from dobcheck.commands.calendar_cmd import calendar_cmd
    from dobcheck.commands.verify import verify

    cli.add_command(verify)
    cli.add_command(calendar_cmd)
    cli.add_command(bench)
