"""Tests for the step CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from hrtracker.cli import cli
from hrtracker.infrastructure.records import RegularSchedule
from hrtracker.infrastructure.store import ScheduleStore
from tests.conftest import FIXED_NOW, two_hours


@pytest.mark.usefixtures("_isolated_home")
class TestStepCommand:
    def test_step_once(self, cli_runner: CliRunner, home_store: ScheduleStore) -> None:
        home_store.save("gym", RegularSchedule.create(FIXED_NOW, two_hours()))
        result = cli_runner.invoke(cli, ["--json", "step", "gym"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)["data"]
        assert data["steps"] == 1
        assert data["next_iso"] == "2024-03-10T10:30:00.123456789Z"
        assert data["previous"] == "2024-03-10 08:30:00.123456789 UTC"
        assert home_store.open("gym").next_trigger == FIXED_NOW + two_hours()

    def test_step_times(self, cli_runner: CliRunner, home_store: ScheduleStore) -> None:
        home_store.save("gym", RegularSchedule.create(FIXED_NOW, two_hours()))
        result = cli_runner.invoke(cli, ["step", "gym", "--times", "3"])
        assert result.exit_code == 0, result.output
        assert home_store.open("gym").next_trigger == FIXED_NOW + two_hours() * 3

    def test_step_human_output(self, cli_runner: CliRunner, home_store: ScheduleStore) -> None:
        home_store.save("gym", RegularSchedule.create(FIXED_NOW, two_hours()))
        result = cli_runner.invoke(cli, ["step", "gym"])
        assert result.exit_code == 0
        assert result.output.startswith("now in -")
        assert "2024-03-10 10:30:00.123456789 UTC" in result.output

    def test_step_twice_persists(self, cli_runner: CliRunner, home_store: ScheduleStore) -> None:
        home_store.save("gym", RegularSchedule.create(FIXED_NOW, two_hours()))
        cli_runner.invoke(cli, ["step", "gym"])
        cli_runner.invoke(cli, ["step", "gym"])
        assert home_store.open("gym").next_trigger == FIXED_NOW + two_hours() * 2

    def test_step_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "step", "ghost"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"

    def test_step_corrupt_file_untouched(
        self, cli_runner: CliRunner, home_store: ScheduleStore
    ) -> None:
        home_store.ensure_root()
        path = home_store.path_for("junk")
        path.write_bytes(b"not a schedule")
        result = cli_runner.invoke(cli, ["step", "junk"])
        assert result.exit_code == 1
        assert "ERROR" in result.output
        assert path.read_bytes() == b"not a schedule"

    def test_times_must_be_positive(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["step", "gym", "--times", "0"])
        assert result.exit_code == 2
