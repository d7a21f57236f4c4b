"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from tsctl.config.logging import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    ts = logging.getLogger("tsctl")
    ts_level = ts.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    ts.setLevel(ts_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("tsctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("tsctl").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("tsctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "tsctl.test"
        assert "timestamp" in parsed

    def test_service_debug_logged_when_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        from tsctl.services.timespec import TimespecService

        configure_logging(verbose=True, log_json=True)
        TimespecService().normalize(0, -500_000_000)
        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        assert lines[-1]["event"] == "normalize"
        assert lines[-1]["logger"] == "tsctl.services.timespec"
        assert lines[-1]["result"] == {"seconds": -1, "nanoseconds": 500_000_000}

    def test_service_debug_suppressed_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        from tsctl.services.timespec import TimespecService

        configure_logging(verbose=False, log_json=True)
        TimespecService().normalize(1, 2)
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_stdlib_logger_rendered_as_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger(f"{LOGGER_NAME}.commands").debug("plain stdlib record")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "plain stdlib record"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "tsctl.commands"

    def test_other_libraries_stay_quiet(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("somelib").debug("noise")
        assert capfd.readouterr().err == ""
