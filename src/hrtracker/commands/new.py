"""Command: create a schedule."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hrtracker.commands._base import HrtCommand
from hrtracker.commands._params import DATETIME, DURATION, SCHEDULE_NAME
from hrtracker.config.logging import bind_action

if TYPE_CHECKING:
    from hrtracker.commands._context import AppContext
    from hrtracker.domain.temporal import Duration, Timestamp


@click.command(
    cls=HrtCommand,
    examples="""\
  hrtracker new gym tomorrow+07:00 23
  hrtracker new meds now 08
  hrtracker new standup today+09:30:00 12
  hrtracker new stretch tmrw+18 12:00 --no-clobber""",
)
@click.argument("name", type=SCHEDULE_NAME)
@click.argument("start", type=DATETIME)
@click.argument("every", type=DURATION)
@click.option(
    "--no-clobber", is_flag=True, help="Fail instead of replacing an existing schedule."
)
@click.pass_obj
def new(app: AppContext, name: str, start: Timestamp, every: Duration, no_clobber: bool) -> None:
    """Create schedule NAME firing first at START and then every EVERY.

    START is now, today, tomorrow, or tmrw, optionally followed by
    +HH[:MM[:SS]]. EVERY is HH[:MM[:SS]].
    """
    bind_action("new", name)
    app.emit(app.schedules.new_schedule(name, start, every, overwrite=not no_clobber))
