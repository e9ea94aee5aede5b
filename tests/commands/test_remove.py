"""Tests for the remove CLI command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from hrtracker.cli import cli
from hrtracker.infrastructure.records import RegularSchedule
from hrtracker.infrastructure.store import ScheduleStore
from tests.conftest import FIXED_NOW, two_hours


@pytest.mark.usefixtures("_isolated_home")
class TestRemoveCommand:
    def test_remove(self, cli_runner: CliRunner, home_store: ScheduleStore) -> None:
        home_store.save("gym", RegularSchedule.create(FIXED_NOW, two_hours()))
        result = cli_runner.invoke(cli, ["--json", "remove", "gym"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["name"] == "gym"
        assert not home_store.exists("gym")

    def test_remove_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "remove", "ghost"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "NOT_FOUND"
