"""Command: advance a schedule by its interval."""

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
  hrtracker step gym
  hrtracker step gym --times 3
  hrtracker --json step meds""",
)
@click.argument("name", type=SCHEDULE_NAME)
@click.option(
    "-n",
    "--times",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of intervals to advance.",
)
@click.pass_obj
def step(app: AppContext, name: str, times: int) -> None:
    """Move schedule NAME to its next trigger and save it."""
    bind_action("step", name)
    app.emit(app.schedules.step(name, times=times))
