"""Grammar for human-entered dates and durations.

Duration:  ``HH[:MM[:SS]]`` with exactly two digits per field.
Date:      ``now`` | ``today`` | ``tomorrow`` | ``tmrw``.
Datetime:  ``<date>[+<duration>]``, split on the first ``+``.

Width checks run before range checks so malformed input is rejected
as a FormatError before any BoundsError is considered.
"""

from __future__ import annotations

from hrtracker.domain.temporal import Duration, Timestamp
from hrtracker.errors import BoundsError, FormatError

DATE_KEYWORDS = ("now", "today", "tomorrow", "tmrw")

# (unit name, inclusive upper bound), in input order
_DURATION_FIELDS: tuple[tuple[str, int], ...] = (
    ("hour", 23),
    ("minute", 59),
    ("second", 59),
)


def split_once(text: str, delimiter: str) -> tuple[str, str | None]:
    """Split *text* on the first *delimiter*; the rest is None when absent."""
    head, sep, rest = text.partition(delimiter)
    if not sep:
        return text, None
    return head, rest


def _parse_field(raw: str, unit: str, upper: int) -> int:
    if len(raw) != 2:
        msg = f"expected 2 {unit} digits, got {len(raw)} in `{raw}`"
        raise FormatError(msg)
    if not (raw.isascii() and raw.isdigit()):
        msg = f"`{raw}` is not a valid number of {unit}s"
        raise FormatError(msg)
    value = int(raw)
    if value > upper:
        msg = f"`{value}` out of bounds (expected 0 to {upper} {unit}s)"
        raise BoundsError(msg)
    return value


def parse_duration(hhmmss: str) -> Duration:
    """Parse ``HH[:MM[:SS]]`` into a Duration.

    Raises:
        FormatError: a field is not exactly two ASCII digits, or there are
            more than two ``:`` separators.
        BoundsError: hours above 23, or minutes/seconds above 59.
    """
    values: list[int] = []
    rest: str | None = hhmmss
    for unit, upper in _DURATION_FIELDS:
        if rest is None:
            break
        raw, rest = split_once(rest, ":")
        values.append(_parse_field(raw, unit, upper))
    if rest is not None:
        msg = f"unexpected trailing `:{rest}` in duration `{hhmmss}`"
        raise FormatError(msg)
    hours, minutes, seconds = values + [0] * (3 - len(values))
    return Duration.of(hours=hours, minutes=minutes, seconds=seconds)


def parse_date(keyword: str, *, now: Timestamp | None = None) -> Timestamp:
    """Resolve a date keyword against *now* (default: the current instant)."""
    current = now or Timestamp.now()
    if keyword == "now":
        return current
    if keyword == "today":
        return Timestamp.today(current)
    if keyword in ("tomorrow", "tmrw"):
        return Timestamp.today(current).add_days(1)
    msg = f"`{keyword}` is not a valid date (expected one of: {', '.join(DATE_KEYWORDS)})"
    raise FormatError(msg)


def parse_datetime(expr: str, *, now: Timestamp | None = None) -> Timestamp:
    """Parse ``<date>[+<duration>]`` into a Timestamp."""
    date_part, offset_part = split_once(expr, "+")
    moment = parse_date(date_part, now=now)
    if offset_part is None:
        return moment
    return moment + parse_duration(offset_part)
