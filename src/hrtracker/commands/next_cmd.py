"""Command: show when a schedule fires next."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hrtracker.commands._base import HrtCommand
from hrtracker.commands._params import SCHEDULE_NAME
from hrtracker.config.logging import bind_action

if TYPE_CHECKING:
    from hrtracker.commands._context import AppContext


@click.command(
    "next",
    cls=HrtCommand,
    examples="""\
  hrtracker next gym
  hrtracker -q next gym""",
)
@click.argument("name", type=SCHEDULE_NAME)
@click.pass_obj
def next_cmd(app: AppContext, name: str) -> None:
    """Show the next trigger of schedule NAME and the time remaining."""
    bind_action("next", name)
    app.emit(app.schedules.next_schedule(name))
