"""Command group: monthly meeting date and attendance totals."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from ministryctl.commands._base import MinistryGroup

if TYPE_CHECKING:
    from ministryctl.commands._context import AppContext


@click.group(
    cls=MinistryGroup,
    examples="""\
  ministryctl meeting anchor
  ministryctl meeting anchor --year 2026 --month 2
  ministryctl meeting attendance attendance-2025-07.yaml --year 2025 --month 7""",
)
def meeting() -> None:
    """Monthly meeting scheduling and attendance."""


@meeting.command(
    examples="""\
  ministryctl meeting anchor
  ministryctl meeting anchor --month 7 --year 2025
  ministryctl meeting anchor --month 7 --day 13 --time 15:30""",
)
@click.option("--year", type=int, default=None, help="Meeting year (default: current).")
@click.option("--month", type=int, default=None, help="Meeting month 1-12 (default: current).")
@click.option("--day", type=int, default=None, help="Override the first-Sunday default.")
@click.option("--time", "time_", default=None, help="Override the meeting time (HH:MM).")
@click.pass_obj
def anchor(
    app: AppContext,
    year: int | None,
    month: int | None,
    day: int | None,
    time_: str | None,
) -> None:
    """Show the meeting date: the first Sunday of the month unless overridden."""
    from ministryctl.services.meeting import MeetingService

    app.emit(MeetingService(app.settings, app.clock).anchor(year, month, day, time_))


@meeting.command(
    examples="""\
  ministryctl meeting attendance sheet.yaml
  ministryctl --json meeting attendance sheet.yaml --year 2025 --month 7""",
)
@click.argument("sheet", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--year", type=int, default=None, help="Meeting year (default: current).")
@click.option("--month", type=int, default=None, help="Meeting month 1-12 (default: current).")
@click.pass_obj
def attendance(app: AppContext, sheet: Path, year: int | None, month: int | None) -> None:
    """Summarize attendance and dues from an attendance SHEET (YAML)."""
    from ministryctl.services.meeting import MeetingService

    app.emit(MeetingService(app.settings, app.clock).attendance(sheet, year, month))
