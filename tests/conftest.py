"""Shared pytest fixtures and test helpers for hrtracker tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from hrtracker.domain.temporal import Duration, Timestamp
from hrtracker.infrastructure.store import ScheduleStore
from hrtracker.services.schedule import ScheduleService

# 2024-03-10 08:30:00.123456789 UTC
FIXED_NOW = Timestamp.from_parts(19792, 8 * 3600 + 30 * 60, 123_456_789)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def schedule_dir(tmp_path: Path) -> Path:
    """Empty schedule directory."""
    root = tmp_path / "schedules"
    root.mkdir()
    return root


@pytest.fixture
def store(schedule_dir: Path) -> ScheduleStore:
    return ScheduleStore(schedule_dir)


@pytest.fixture
def service(store: ScheduleStore) -> ScheduleService:
    return ScheduleService(store)


@pytest.fixture
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME and cwd at a temp dir so the CLI uses ``<tmp>/.hrtracker``.

    Use via ``@pytest.mark.usefixtures("_isolated_home")`` on command test
    classes.
    """
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("HRTRACKER_CONFIG", raising=False)
    monkeypatch.delenv("HRTRACKER_SCHEDULE_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def two_hours() -> Duration:
    return Duration.of(hours=2)


@pytest.fixture
def home_store(_isolated_home: Path) -> ScheduleStore:
    """The store the CLI sees under ``_isolated_home``."""
    return ScheduleStore(_isolated_home / ".hrtracker")
