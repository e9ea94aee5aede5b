"""Click parameter types backed by the date/duration grammar.

Grammar errors surface as click usage errors (exit code 2) that echo the
offending input.
"""

from __future__ import annotations

from typing import Any

import click

from hrtracker.domain.grammar import parse_datetime, parse_duration
from hrtracker.domain.temporal import Duration, Timestamp
from hrtracker.errors import BoundsError, FormatError
from hrtracker.infrastructure.store import validate_name


class DateTimeParam(click.ParamType):
    """``<date>[+HH[:MM[:SS]]]`` where date is now, today, tomorrow, or tmrw."""

    name = "datetime"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Timestamp:
        if isinstance(value, Timestamp):
            return value
        try:
            return parse_datetime(value)
        except (FormatError, BoundsError) as exc:
            self.fail(f"{value!r}: {exc}", param, ctx)


class DurationParam(click.ParamType):
    """``HH[:MM[:SS]]``, two digits per field."""

    name = "duration"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Duration:
        if isinstance(value, Duration):
            return value
        try:
            return parse_duration(value)
        except (FormatError, BoundsError) as exc:
            self.fail(f"{value!r}: {exc}", param, ctx)


class ScheduleNameParam(click.ParamType):
    """A schedule name: one file name inside the schedule directory."""

    name = "name"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> str:
        try:
            return validate_name(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


DATETIME = DateTimeParam()
DURATION = DurationParam()
SCHEDULE_NAME = ScheduleNameParam()
