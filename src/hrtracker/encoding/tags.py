"""Record-kind identifiers embedded in every encoded record.

A tag is a fixed 8-byte marker written verbatim after the version. On
decode it is compared byte-for-byte against the expected marker; it is
never returned as data. Opening an unrelated file therefore fails with
an explicit error instead of yielding garbage field values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO

from hrtracker.encoding.primitives import PrimitiveRepr, Version, read_exact
from hrtracker.errors import InvalidDataError

TAG_LENGTH = 8


@dataclass(frozen=True)
class RecordTag:
    """The marker bytes for one record kind plus a name for diagnostics."""

    marker: bytes
    name: str

    def __post_init__(self) -> None:
        if len(self.marker) != TAG_LENGTH:
            msg = f"record tag for {self.name} must be {TAG_LENGTH} bytes, got {len(self.marker)}"
            raise ValueError(msg)

    def encode(self, sink: IO[bytes], version: Version, mode: PrimitiveRepr) -> None:
        """Write the marker; version and mode do not apply to identifiers."""
        sink.write(self.marker)

    def expect(self, source: IO[bytes], version: Version, mode: PrimitiveRepr) -> None:
        """Read the marker and fail unless it matches exactly."""
        found = read_exact(source, TAG_LENGTH)
        if found != self.marker:
            msg = f"incorrect identifier for {self.name} (found {found!r})"
            raise InvalidDataError(msg)
