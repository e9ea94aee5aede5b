"""Command: list every schedule with its next trigger."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hrtracker.commands._base import HrtCommand
from hrtracker.config.logging import bind_action

if TYPE_CHECKING:
    from hrtracker.commands._context import AppContext


@click.command(
    "list",
    cls=HrtCommand,
    examples="""\
  hrtracker list
  hrtracker
  hrtracker --json list
  hrtracker -q list""",
)
@click.pass_obj
def list_cmd(app: AppContext) -> None:
    """List schedules: name, next trigger, time remaining, interval.

    Files that cannot be read as schedules are reported and skipped.
    """
    bind_action("list")
    app.emit(app.schedules.list_schedules())
