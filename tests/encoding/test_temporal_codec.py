"""Tests for the Timestamp/Duration binary codecs."""

import io

import pytest

from hrtracker.domain.temporal import MAX_EPOCH_DAY, MIN_EPOCH_DAY, Duration, Timestamp
from hrtracker.encoding.primitives import I32, I64, U32, PrimitiveRepr, Version, encode_int
from hrtracker.encoding.temporal import (
    decode_duration,
    decode_timestamp,
    encode_duration,
    encode_timestamp,
)
from hrtracker.errors import InvalidDataError, UnexpectedEndError

V = Version(0, 0, 2)
MODES = list(PrimitiveRepr)


def _raw_timestamp(day: int, seconds: int, nanos: int, mode: PrimitiveRepr) -> io.BytesIO:
    sink = io.BytesIO()
    encode_int(day, I32, sink, V, mode)
    encode_int(seconds, U32, sink, V, mode)
    encode_int(nanos, U32, sink, V, mode)
    sink.seek(0)
    return sink


def _round_trip_timestamp(ts: Timestamp, mode: PrimitiveRepr) -> Timestamp:
    sink = io.BytesIO()
    encode_timestamp(ts, sink, V, mode)
    sink.seek(0)
    return decode_timestamp(sink, V, mode)


def _round_trip_duration(d: Duration, mode: PrimitiveRepr) -> Duration:
    sink = io.BytesIO()
    encode_duration(d, sink, V, mode)
    sink.seek(0)
    return decode_duration(sink, V, mode)


@pytest.mark.parametrize("mode", MODES)
class TestTimestampCodec:
    @pytest.mark.parametrize(
        "parts",
        [
            (0, 0, 0),
            (19792, 30_600, 123_456_789),
            (-1, 86_399, 999_999_999),
            (MIN_EPOCH_DAY, 0, 0),
            (MAX_EPOCH_DAY, 86_399, 999_999_999),
        ],
    )
    def test_round_trip(self, mode: PrimitiveRepr, parts: tuple[int, int, int]) -> None:
        ts = Timestamp.from_parts(*parts)
        assert _round_trip_timestamp(ts, mode) == ts

    def test_field_order(self, mode: PrimitiveRepr) -> None:
        ts = Timestamp.from_parts(19792, 30_600, 5)
        sink = io.BytesIO()
        encode_timestamp(ts, sink, V, mode)
        assert sink.getvalue() == _raw_timestamp(19792, 30_600, 5, mode).getvalue()

    def test_unrepresentable_date(self, mode: PrimitiveRepr) -> None:
        with pytest.raises(InvalidDataError, match="invalid date"):
            decode_timestamp(_raw_timestamp(MAX_EPOCH_DAY + 1, 0, 0, mode), V, mode)

    def test_seconds_out_of_range(self, mode: PrimitiveRepr) -> None:
        with pytest.raises(InvalidDataError, match="invalid time"):
            decode_timestamp(_raw_timestamp(0, 86_400, 0, mode), V, mode)

    def test_nanoseconds_out_of_range(self, mode: PrimitiveRepr) -> None:
        with pytest.raises(InvalidDataError, match="invalid time"):
            decode_timestamp(_raw_timestamp(0, 0, 1_000_000_000, mode), V, mode)

    def test_truncated(self, mode: PrimitiveRepr) -> None:
        data = _raw_timestamp(19792, 30_600, 5, mode).getvalue()[:-1]
        with pytest.raises(UnexpectedEndError):
            decode_timestamp(io.BytesIO(data), V, mode)


@pytest.mark.parametrize("mode", MODES)
class TestDurationCodec:
    @pytest.mark.parametrize(
        "nanos",
        [0, 1, -1, 7_200_000_000_000, -86_400_000_000_000, 2**63 - 1, -(2**63)],
    )
    def test_round_trip(self, mode: PrimitiveRepr, nanos: int) -> None:
        assert _round_trip_duration(Duration(nanos), mode) == Duration(nanos)

    @pytest.mark.parametrize("nanos", [2**63, -(2**63) - 1, 10**30])
    def test_too_large(self, mode: PrimitiveRepr, nanos: int) -> None:
        sink = io.BytesIO()
        with pytest.raises(InvalidDataError, match="too large"):
            encode_duration(Duration(nanos), sink, V, mode)
        assert sink.getvalue() == b""

    def test_reads_single_i64(self, mode: PrimitiveRepr) -> None:
        sink = io.BytesIO()
        encode_int(-5, I64, sink, V, mode)
        sink.seek(0)
        assert decode_duration(sink, V, mode) == Duration(-5)
