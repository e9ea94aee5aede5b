"""Primitive integer codecs and the version/representation settings.

Two representations are supported:

- ``FIXED``: little-endian, the kind's full width (``struct``).
- ``VARINT``: unsigned LEB128; signed kinds are zigzag-mapped first so
  small negative numbers stay small.

INVARIANT: values are never truncated. An out-of-range value on encode,
or a decoded value that does not fit the kind, is an InvalidDataError.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import StrEnum
from typing import IO, NamedTuple

from hrtracker.errors import InvalidDataError, UnexpectedEndError


class Version(NamedTuple):
    """Format version, compared component-wise."""

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


VERSION_ZERO = Version(0, 0, 0)


class PrimitiveRepr(StrEnum):
    """How base integers are packed into bytes."""

    FIXED = "fixed"
    VARINT = "varint"


@dataclass(frozen=True)
class IntKind:
    """A fixed-width integer type: its name, bit width, and signedness."""

    name: str
    bits: int
    signed: bool
    struct_code: str

    @property
    def min(self) -> int:
        return -(1 << (self.bits - 1)) if self.signed else 0

    @property
    def max(self) -> int:
        return (1 << (self.bits - 1)) - 1 if self.signed else (1 << self.bits) - 1

    @property
    def size(self) -> int:
        return self.bits // 8

    @property
    def max_varint_len(self) -> int:
        return -(-self.bits // 7)

    def contains(self, value: int) -> bool:
        return self.min <= value <= self.max


U16 = IntKind("u16", 16, False, "<H")
I32 = IntKind("i32", 32, True, "<i")
U32 = IntKind("u32", 32, False, "<I")
I64 = IntKind("i64", 64, True, "<q")


def read_exact(source: IO[bytes], count: int) -> bytes:
    """Read exactly *count* bytes or raise UnexpectedEndError."""
    chunks: list[bytes] = []
    remaining = count
    while remaining:
        chunk = source.read(remaining)
        if not chunk:
            msg = f"unexpected end of data (wanted {count} bytes, got {count - remaining})"
            raise UnexpectedEndError(msg)
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def _zigzag(value: int) -> int:
    return value << 1 if value >= 0 else ((-value) << 1) - 1


def _unzigzag(value: int) -> int:
    return (value >> 1) ^ -(value & 1)


def _write_varint(value: int, sink: IO[bytes]) -> None:
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            break
    sink.write(bytes(out))


def _read_varint(kind: IntKind, source: IO[bytes]) -> int:
    result = 0
    for index in range(kind.max_varint_len):
        byte = read_exact(source, 1)[0]
        result |= (byte & 0x7F) << (7 * index)
        if not byte & 0x80:
            return result
    msg = f"varint for {kind.name} longer than {kind.max_varint_len} bytes"
    raise InvalidDataError(msg)


def encode_int(
    value: int,
    kind: IntKind,
    sink: IO[bytes],
    version: Version,
    mode: PrimitiveRepr,
) -> None:
    """Write *value* as *kind* using the *mode* packing."""
    if not kind.contains(value):
        msg = f"{value} does not fit in {kind.name} ({kind.min} to {kind.max})"
        raise InvalidDataError(msg)
    if mode is PrimitiveRepr.FIXED:
        sink.write(struct.pack(kind.struct_code, value))
    else:
        _write_varint(_zigzag(value) if kind.signed else value, sink)


def decode_int(
    kind: IntKind,
    source: IO[bytes],
    version: Version,
    mode: PrimitiveRepr,
) -> int:
    """Read one *kind* integer using the *mode* packing."""
    if mode is PrimitiveRepr.FIXED:
        (value,) = struct.unpack(kind.struct_code, read_exact(source, kind.size))
        return value
    raw = _read_varint(kind, source)
    if raw > (1 << kind.bits) - 1:
        msg = f"varint value {raw} overflows {kind.name}"
        raise InvalidDataError(msg)
    return _unzigzag(raw) if kind.signed else raw


def encode_version(version: Version, sink: IO[bytes], mode: PrimitiveRepr) -> None:
    for component in version:
        encode_int(component, U16, sink, version, mode)


def decode_version(source: IO[bytes], mode: PrimitiveRepr) -> Version:
    return Version(*(decode_int(U16, source, VERSION_ZERO, mode) for _ in range(3)))
