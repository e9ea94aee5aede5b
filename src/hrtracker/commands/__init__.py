"""Subcommand modules for hrtracker.

Provides register_commands() which uses deferred imports to keep
``hrtracker --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the schedule actions on the root CLI group."""
    from hrtracker.commands.list_cmd import list_cmd
    from hrtracker.commands.new import new
    from hrtracker.commands.next_cmd import next_cmd
    from hrtracker.commands.remove import remove
    from hrtracker.commands.step import step

    cli.add_command(list_cmd)
    cli.add_command(new)
    cli.add_command(step)
    cli.add_command(next_cmd)
    cli.add_command(remove)
