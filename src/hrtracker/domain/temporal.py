"""UTC timestamps and signed durations with nanosecond precision.

``datetime`` stops at microseconds, so both types carry an integer
nanosecond count and only borrow ``datetime.date`` for calendar math.

A Timestamp decomposes into the three integers the codec stores:
epoch-day count (days since 1970-01-01, signed), seconds since midnight
and nanosecond of second. Its range is the proleptic Gregorian years
1..9999, the dates ``datetime.date`` can represent.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import date

from hrtracker.errors import BoundsError

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
SECONDS_PER_DAY = 86_400
NANOS_PER_DAY = SECONDS_PER_DAY * NANOS_PER_SECOND

EPOCH = date(1970, 1, 1)
_EPOCH_ORDINAL = EPOCH.toordinal()

MIN_EPOCH_DAY = date.min.toordinal() - _EPOCH_ORDINAL
MAX_EPOCH_DAY = date.max.toordinal() - _EPOCH_ORDINAL

_MIN_NANOS = MIN_EPOCH_DAY * NANOS_PER_DAY
_MAX_NANOS = (MAX_EPOCH_DAY + 1) * NANOS_PER_DAY - 1


def _truncate_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


@dataclass(frozen=True, order=True)
class Duration:
    """Signed span of time as a whole number of nanoseconds.

    The count is unbounded here; the codec rejects values that do not
    fit its signed 64-bit field.
    """

    nanoseconds: int = 0

    @classmethod
    def of(
        cls,
        *,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        nanoseconds: int = 0,
    ) -> Duration:
        return cls(
            hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + nanoseconds
        )

    @classmethod
    def zero(cls) -> Duration:
        return cls(0)

    @property
    def whole_hours(self) -> int:
        return _truncate_div(self.nanoseconds, NANOS_PER_HOUR)

    @property
    def whole_minutes(self) -> int:
        return _truncate_div(self.nanoseconds, NANOS_PER_MINUTE)

    @property
    def whole_seconds(self) -> int:
        return _truncate_div(self.nanoseconds, NANOS_PER_SECOND)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds + other.nanoseconds)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration(self.nanoseconds - other.nanoseconds)

    def __mul__(self, factor: object) -> Duration:
        if not isinstance(factor, int):
            return NotImplemented
        return Duration(self.nanoseconds * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Duration:
        return Duration(-self.nanoseconds)

    def __abs__(self) -> Duration:
        return Duration(abs(self.nanoseconds))

    def __bool__(self) -> bool:
        return self.nanoseconds != 0


@dataclass(frozen=True, order=True)
class Timestamp:
    """An instant on the UTC timeline, nanoseconds since 1970-01-01T00:00:00."""

    epoch_nanos: int

    def __post_init__(self) -> None:
        if not _MIN_NANOS <= self.epoch_nanos <= _MAX_NANOS:
            msg = f"timestamp out of range ({self.epoch_nanos} ns from epoch)"
            raise BoundsError(msg)

    # -- Construction --------------------------------------------------

    @classmethod
    def from_parts(cls, epoch_day: int, second_of_day: int, nanosecond: int) -> Timestamp:
        """Build a timestamp from its stored components, validating each."""
        if not MIN_EPOCH_DAY <= epoch_day <= MAX_EPOCH_DAY:
            msg = (
                f"epoch day {epoch_day} is not a representable date "
                f"(expected {MIN_EPOCH_DAY} to {MAX_EPOCH_DAY})"
            )
            raise BoundsError(msg)
        if not 0 <= second_of_day < SECONDS_PER_DAY:
            msg = f"second of day {second_of_day} out of bounds (expected 0 to 86399)"
            raise BoundsError(msg)
        if not 0 <= nanosecond < NANOS_PER_SECOND:
            msg = f"nanosecond {nanosecond} out of bounds (expected 0 to 999999999)"
            raise BoundsError(msg)
        return cls(epoch_day * NANOS_PER_DAY + second_of_day * NANOS_PER_SECOND + nanosecond)

    @classmethod
    def now(cls) -> Timestamp:
        return cls(time.time_ns())

    @classmethod
    def today(cls, now: Timestamp | None = None) -> Timestamp:
        """Midnight UTC at the start of the current (or given) day."""
        return (now or cls.now()).start_of_day()

    # -- Components ----------------------------------------------------

    @property
    def epoch_day(self) -> int:
        return self.epoch_nanos // NANOS_PER_DAY

    @property
    def second_of_day(self) -> int:
        return (self.epoch_nanos % NANOS_PER_DAY) // NANOS_PER_SECOND

    @property
    def nanosecond(self) -> int:
        return self.epoch_nanos % NANOS_PER_SECOND

    @property
    def date(self) -> date:
        return date.fromordinal(self.epoch_day + _EPOCH_ORDINAL)

    def start_of_day(self) -> Timestamp:
        return Timestamp(self.epoch_day * NANOS_PER_DAY)

    def add_days(self, days: int) -> Timestamp:
        return Timestamp(self.epoch_nanos + days * NANOS_PER_DAY)

    # -- Arithmetic ----------------------------------------------------

    def __add__(self, other: object) -> Timestamp:
        if not isinstance(other, Duration):
            return NotImplemented
        return Timestamp(self.epoch_nanos + other.nanoseconds)

    __radd__ = __add__

    def __sub__(self, other: object) -> Timestamp | Duration:
        if isinstance(other, Duration):
            return Timestamp(self.epoch_nanos - other.nanoseconds)
        if isinstance(other, Timestamp):
            return Duration(self.epoch_nanos - other.epoch_nanos)
        return NotImplemented

    def since(self, other: Timestamp) -> Duration:
        """Signed duration from *other* to this instant."""
        return Duration(self.epoch_nanos - other.epoch_nanos)

    # -- Display -------------------------------------------------------

    def _clock(self) -> str:
        seconds = self.second_of_day
        text = f"{seconds // 3600:02d}:{(seconds // 60) % 60:02d}:{seconds % 60:02d}"
        nanos = self.nanosecond
        if nanos == 0:
            return text
        if nanos % 1_000_000 == 0:
            return f"{text}.{nanos // 1_000_000:03d}"
        if nanos % 1_000 == 0:
            return f"{text}.{nanos // 1_000:06d}"
        return f"{text}.{nanos:09d}"

    def isoformat(self) -> str:
        return f"{self.date.isoformat()}T{self._clock()}Z"

    def __str__(self) -> str:
        return f"{self.date.isoformat()} {self._clock()} UTC"


def format_interval(duration: Duration) -> str:
    """Render a duration as ``[-]HHhMMmSSs``.

    Hours are not wrapped into days; every component truncates toward zero.
    """
    sign = "-" if duration.nanoseconds < 0 else ""
    hours = abs(duration.whole_hours)
    minutes = abs(duration.whole_minutes) % 60
    seconds = abs(duration.whole_seconds) % 60
    return f"{sign}{hours:02d}h{minutes:02d}m{seconds:02d}s"
