"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog

from ministryctl.config.logging import LOGGER_NAME, bind_run_context, configure_logging


@pytest.fixture(autouse=True)
def _restore_package_level() -> Generator[None]:
    logger = logging.getLogger(LOGGER_NAME)
    level = logger.level
    yield
    logger.setLevel(level)
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("ministryctl").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("ministryctl").level == logging.WARNING

    def test_single_handler(self) -> None:
        configure_logging()
        configure_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("ministryctl.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"

    def test_stdlib_loggers_rendered(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("ministryctl.infrastructure.roster").warning("skipped %d", 3)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "skipped 3"
        assert parsed["logger"] == "ministryctl.infrastructure.roster"

    def test_debug_suppressed_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("ministryctl.services").debug("hidden")
        assert capfd.readouterr().err == ""


class TestRunContext:
    def test_bound_on_every_line(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        bind_run_context(today="2025-07-20", roster=Path("/ministry/roster.yaml"))
        logging.getLogger("ministryctl.infrastructure.roster").warning("skipped entry")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["today"] == "2025-07-20"
        assert parsed["roster"] == "/ministry/roster.yaml"

    def test_rebinding_replaces_context(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        bind_run_context(today="2025-07-20", roster=Path("a.yaml"))
        bind_run_context(today="2026-02-01", roster=Path("b.yaml"))
        structlog.get_logger("ministryctl.test").warning("x")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["today"] == "2026-02-01"
        assert parsed["roster"] == "b.yaml"
