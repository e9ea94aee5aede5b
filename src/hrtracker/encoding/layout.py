"""Ordered, version-aware record layouts.

A layout is an explicit tuple of fields encoded one after another,
preceded by the record's format version. Each field names the version
that introduced it; decoding an older file skips fields that did not
exist yet and fills them from the field's default.

INVARIANT: field order is the declaration order. Nothing is discovered
by reflection.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import IO, Any

from hrtracker.encoding.primitives import (
    VERSION_ZERO,
    PrimitiveRepr,
    Version,
    decode_version,
    encode_version,
)
from hrtracker.encoding.tags import RecordTag
from hrtracker.errors import InvalidDataError

logger = logging.getLogger(__name__)

Encoder = Callable[[Any, IO[bytes], Version, PrimitiveRepr], None]
Decoder = Callable[[IO[bytes], Version, PrimitiveRepr], Any]


@dataclass(frozen=True)
class Field:
    """One slot in a record layout.

    Attributes:
        name: Key used in the value mapping.
        encode: Writes the value for this slot.
        decode: Reads the value for this slot.
        since: First format version containing this slot.
        default: Factory for the value when decoding an older version.
        stored: False for marker slots (tags) whose decoded value is discarded.
    """

    name: str
    encode: Encoder
    decode: Decoder
    since: Version = VERSION_ZERO
    default: Callable[[], Any] | None = None
    stored: bool = True

    @classmethod
    def marker(cls, name: str, tag: RecordTag, *, since: Version = VERSION_ZERO) -> Field:
        """A slot that writes *tag* verbatim and validates it on read."""
        return cls(
            name=name,
            encode=lambda _value, sink, version, mode: tag.encode(sink, version, mode),
            decode=tag.expect,
            since=since,
            stored=False,
        )


@dataclass(frozen=True)
class RecordLayout:
    """The full wire layout of one record kind."""

    name: str
    latest: Version
    fields: tuple[Field, ...]

    def encode(
        self,
        values: Mapping[str, Any],
        sink: IO[bytes],
        version: Version,
        mode: PrimitiveRepr,
    ) -> None:
        encode_version(version, sink, mode)
        for field in self.fields:
            if version < field.since:
                continue
            field.encode(values.get(field.name), sink, version, mode)

    def decode(self, source: IO[bytes], mode: PrimitiveRepr) -> tuple[Version, dict[str, Any]]:
        """Read the version, then every field that version defines.

        Raises:
            InvalidDataError: the version is newer than this build supports,
                or any field fails its own validation.
        """
        version = decode_version(source, mode)
        if version > self.latest:
            msg = (
                f"unsupported format version {version} for {self.name} "
                f"(newest known {self.latest})"
            )
            raise InvalidDataError(msg)

        values: dict[str, Any] = {}
        for field in self.fields:
            if version < field.since:
                logger.debug("Field %s absent before %s; using default", field.name, field.since)
                if field.stored:
                    values[field.name] = field.default() if field.default else None
                continue
            value = field.decode(source, version, mode)
            if field.stored:
                values[field.name] = value
        return version, values
