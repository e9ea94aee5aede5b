"""The persisted schedule record.

Wire layout (one record per file)::

    [version][tag "regular "][next: timestamp][interval: duration]

INVARIANT: every save stamps the current build version before encoding.
Loading an older record and saving it again upgrades it; there is no
path back to an older layout.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from hrtracker.domain.temporal import Duration, Timestamp
from hrtracker.encoding.layout import Field, RecordLayout
from hrtracker.encoding.primitives import PrimitiveRepr, Version
from hrtracker.encoding.tags import RecordTag
from hrtracker.encoding.temporal import (
    decode_duration,
    decode_timestamp,
    encode_duration,
    encode_timestamp,
)

logger = logging.getLogger(__name__)

LATEST = Version(0, 0, 2)
WIRE_MODE = PrimitiveRepr.VARINT

REGULAR_SCHEDULE_TAG = RecordTag(b"regular ", "regular schedule")

REGULAR_SCHEDULE_LAYOUT = RecordLayout(
    name="regular schedule",
    latest=LATEST,
    fields=(
        Field.marker("id", REGULAR_SCHEDULE_TAG, since=Version(0, 0, 2)),
        Field("next_trigger", encode_timestamp, decode_timestamp),
        Field("interval", encode_duration, decode_duration),
    ),
)


@dataclass
class RegularSchedule:
    """A recurring trigger: when it next fires and how often it repeats.

    The interval sign is not checked; zero or negative intervals are stored
    and advanced like any other.
    """

    next_trigger: Timestamp
    interval: Duration
    version: Version = LATEST

    @classmethod
    def create(cls, start: Timestamp, every: Duration) -> RegularSchedule:
        """New in-memory record stamped with the current version. No I/O."""
        return cls(next_trigger=start, interval=every, version=LATEST)

    # -- Codec ---------------------------------------------------------

    def encode(self, sink: IO[bytes], mode: PrimitiveRepr = WIRE_MODE) -> None:
        values = {"next_trigger": self.next_trigger, "interval": self.interval}
        REGULAR_SCHEDULE_LAYOUT.encode(values, sink, self.version, mode)

    @classmethod
    def decode(cls, source: IO[bytes], mode: PrimitiveRepr = WIRE_MODE) -> RegularSchedule:
        version, values = REGULAR_SCHEDULE_LAYOUT.decode(source, mode)
        return cls(
            next_trigger=values["next_trigger"],
            interval=values["interval"],
            version=version,
        )

    # -- Persistence ---------------------------------------------------

    @classmethod
    def open(cls, path: Path) -> RegularSchedule:
        """Decode a record from *path*.

        Raises:
            InvalidDataError: the file is not a valid regular schedule.
            OSError: the file is missing or unreadable.
        """
        with path.open("rb") as fh:
            schedule = cls.decode(fh)
        logger.debug("Opened schedule %s (format %s)", path, schedule.version)
        return schedule

    def save(self, path: Path) -> None:
        """Stamp the current version and write the record, replacing *path*.

        The record is encoded in memory first, so an encoding error leaves
        any existing file untouched.
        """
        self.version = LATEST
        buffer = io.BytesIO()
        self.encode(buffer)
        path.write_bytes(buffer.getvalue())
        logger.debug("Saved schedule %s (%d bytes)", path, buffer.tell())

    # -- Mutation ------------------------------------------------------

    def advance(self, times: int = 1) -> Timestamp:
        """Move the next trigger forward by *times* intervals and return it."""
        self.next_trigger = self.next_trigger + self.interval * times
        return self.next_trigger

    def remaining(self, now: Timestamp) -> Duration:
        """Signed time from *now* until the next trigger."""
        return self.next_trigger.since(now)
