"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from hrtracker.config.logging import bind_action, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state and context variables after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("hrtracker")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("hrtracker").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("hrtracker").level == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("hrtracker.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "hrtracker.test"
        assert "timestamp" in parsed

    def test_stdlib_logger_gets_bound_action(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        bind_action("step", "gym")
        logging.getLogger("hrtracker.services.schedule").info("advanced")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "advanced"
        assert parsed["action"] == "step"
        assert parsed["schedule"] == "gym"

    def test_quiet_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("hrtracker.store").info("hidden")
        assert capfd.readouterr().err == ""


class TestBindAction:
    def test_rebinding_clears_previous_name(self) -> None:
        bind_action("step", "gym")
        bind_action("list")
        bound = structlog.contextvars.get_contextvars()
        assert bound == {"action": "list"}
