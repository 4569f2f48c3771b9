"""Shared pytest fixtures and test helpers for ministryctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from ministryctl.config.settings import MinistrySettings
from ministryctl.infrastructure.clock import FixedClock

ROSTER_YAML = """\
people:
  - name: Maria Grace Cruz
    surname: Cruz
    given_name: Maria Grace
    birth_date: 2006-07-22
    tenure_start_date: 2021-06-20
    member_number: "1042"
    email: maria@example.org
    user_type: member
    status: active
  - name: Ana Santos
    birth_date: 2005-02-03
    tenure_start_date: 2024-01-07
    user_type: member
    status: active
  - name: Jose Reyes
    birth_date: 1980-02-29
    user_type: admin
    position: Coordinator
    status: active
  - name: Ben Lim
    birth_date: 2004-07-25
    tenure_start_date: 2018-03-04
    member_number: 977
    user_type: member
    status: alumni
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host MINISTRYCTL_* variables out of every test."""
    for var in (
        "MINISTRYCTL_CONFIG",
        "MINISTRYCTL_TODAY",
        "MINISTRYCTL_ROSTER__PATH",
        "MINISTRYCTL_BIRTHDAYS__WINDOW_DAYS",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def ministry_root(tmp_path: Path) -> Path:
    """Temporary ministry directory with a config file and a roster.

    This is the single source of truth for the on-disk layout; the
    settings and CLI fixtures build on it.
    """
    (tmp_path / "ministry.toml").write_text('[roster]\npath = "roster.yaml"\n')
    (tmp_path / "roster.yaml").write_text(ROSTER_YAML)
    return tmp_path


@pytest.fixture
def settings(ministry_root: Path) -> MinistrySettings:
    return MinistrySettings.from_cli(root=ministry_root)


@pytest.fixture
def clock() -> FixedClock:
    """Reference date used by the service tests: 2025-07-20 (a Sunday)."""
    from datetime import date

    return FixedClock(date(2025, 7, 20))


@pytest.fixture
def _isolated_ministry(ministry_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp ministry so the CLI discovers its config.

    Use via ``@pytest.mark.usefixtures("_isolated_ministry")`` on command
    test classes.
    """
    monkeypatch.chdir(ministry_root)

