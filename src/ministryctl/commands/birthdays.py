"""Command group: birthday calendar listings."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ministryctl.commands._base import MinistryGroup

if TYPE_CHECKING:
    from ministryctl.commands._context import AppContext


@click.group(
    cls=MinistryGroup,
    examples="""\
  ministryctl birthdays upcoming
  ministryctl birthdays upcoming --window 7
  ministryctl birthdays month 7
  ministryctl --today 2025-07-22 birthdays today""",
)
def birthdays() -> None:
    """Birthday calendar for admins and members."""


@birthdays.command(
    examples="""\
  ministryctl birthdays upcoming
  ministryctl birthdays upcoming --window 14 --include-today
  ministryctl --json birthdays upcoming""",
)
@click.option(
    "--window",
    "window_days",
    type=int,
    default=None,
    help="Days ahead to look (default from [birthdays] window_days).",
)
@click.option("--include-today", is_flag=True, help="Also list birthdays falling today.")
@click.pass_obj
def upcoming(app: AppContext, window_days: int | None, include_today: bool) -> None:
    """List birthdays coming up soon, nearest first."""
    from ministryctl.services.birthdays import BirthdayService

    result = BirthdayService(app.settings, app.clock).upcoming(
        window_days, include_today=include_today
    )
    app.emit(result)


@birthdays.command(
    examples="""\
  ministryctl birthdays month
  ministryctl birthdays month 12""",
)
@click.argument("month", type=int, required=False)
@click.pass_obj
def month(app: AppContext, month: int | None) -> None:
    """List everyone born in MONTH (1-12, default: current month)."""
    from ministryctl.services.birthdays import BirthdayService

    app.emit(BirthdayService(app.settings, app.clock).in_month(month))


@birthdays.command(
    examples="""\
  ministryctl birthdays today
  ministryctl -q birthdays today""",
)
@click.pass_obj
def today(app: AppContext) -> None:
    """List everyone celebrating a birthday today."""
    from ministryctl.services.birthdays import BirthdayService

    app.emit(BirthdayService(app.settings, app.clock).today())
