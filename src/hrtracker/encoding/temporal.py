"""Binary codecs for Timestamp and Duration.

Timestamp layout: ``[epoch-day:i32][second-of-day:u32][nanosecond:u32]``.
Duration layout:  ``[nanoseconds:i64]``.

Each integer is encoded independently so every field takes the most
compact form the primitive representation offers.
"""

from __future__ import annotations

from typing import IO

from hrtracker.domain.temporal import Duration, Timestamp
from hrtracker.encoding.primitives import (
    I32,
    I64,
    U32,
    PrimitiveRepr,
    Version,
    decode_int,
    encode_int,
)
from hrtracker.errors import BoundsError, InvalidDataError


def encode_timestamp(
    value: Timestamp,
    sink: IO[bytes],
    version: Version,
    mode: PrimitiveRepr,
) -> None:
    encode_int(value.epoch_day, I32, sink, version, mode)
    encode_int(value.second_of_day, U32, sink, version, mode)
    encode_int(value.nanosecond, U32, sink, version, mode)


def decode_timestamp(source: IO[bytes], version: Version, mode: PrimitiveRepr) -> Timestamp:
    """Read the three timestamp integers and validate them as a date and a time of day.

    Raises:
        InvalidDataError: the day count is not a representable date, or the
            seconds/nanosecond pair is not a valid time of day.
    """
    epoch_day = decode_int(I32, source, version, mode)
    second_of_day = decode_int(U32, source, version, mode)
    nanosecond = decode_int(U32, source, version, mode)
    try:
        Timestamp.from_parts(epoch_day, 0, 0)
    except BoundsError as exc:
        msg = f"invalid date while decoding date and time: {exc}"
        raise InvalidDataError(msg) from exc
    try:
        return Timestamp.from_parts(epoch_day, second_of_day, nanosecond)
    except BoundsError as exc:
        msg = f"invalid time while decoding date and time: {exc}"
        raise InvalidDataError(msg) from exc


def encode_duration(
    value: Duration,
    sink: IO[bytes],
    version: Version,
    mode: PrimitiveRepr,
) -> None:
    if not I64.contains(value.nanoseconds):
        msg = f"number of nanoseconds is too large ({value.nanoseconds})"
        raise InvalidDataError(msg)
    encode_int(value.nanoseconds, I64, sink, version, mode)


def decode_duration(source: IO[bytes], version: Version, mode: PrimitiveRepr) -> Duration:
    return Duration(decode_int(I64, source, version, mode))
