"""Tests for ServiceResult, ServiceError, and exception mapping."""

import json

import pytest

from hrtracker.errors import BoundsError, FormatError, InvalidDataError, UnexpectedEndError
from hrtracker.services.base import error_for
from hrtracker.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="new_schedule", data={"name": "gym"})
        assert result.ok is True
        assert result.op == "new_schedule"
        assert result.data == {"name": "gym"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="NOT_FOUND", message="No such schedule")
        result = ServiceResult(ok=False, op="next_schedule", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="list_schedules", data={"count": 0, "items": []})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["items"] == []

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestErrorFor:
    @pytest.mark.parametrize(
        "exc,code",
        [
            (InvalidDataError("bad tag"), "INVALID_DATA"),
            (UnexpectedEndError("short"), "INVALID_DATA"),
            (BoundsError("past 9999"), "OUT_OF_RANGE"),
            (FormatError("`x` is not a valid date"), "INVALID_FORMAT"),
            (FileNotFoundError("gone"), "NOT_FOUND"),
            (FileExistsError("there"), "ALREADY_EXISTS"),
            (PermissionError("denied"), "IO_ERROR"),
            (ValueError("a/b"), "INVALID_NAME"),
        ],
    )
    def test_codes(self, exc: Exception, code: str) -> None:
        error = error_for(exc)
        assert error.code == code
        assert error.message == str(exc)
        assert error.detail["type"] == type(exc).__name__
