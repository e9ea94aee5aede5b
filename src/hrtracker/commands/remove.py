"""Command: delete a schedule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hrtracker.commands._base import HrtCommand
from hrtracker.commands._params import SCHEDULE_NAME
from hrtracker.config.logging import bind_action

if TYPE_CHECKING:
    from hrtracker.commands._context import AppContext


@click.command(
    cls=HrtCommand,
    examples="""\
  hrtracker remove gym
  hrtracker --json remove meds""",
)
@click.argument("name", type=SCHEDULE_NAME)
@click.pass_obj
def remove(app: AppContext, name: str) -> None:
    """Delete schedule NAME."""
    bind_action("remove", name)
    app.emit(app.schedules.remove(name))
