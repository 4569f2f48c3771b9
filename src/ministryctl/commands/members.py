"""Command group: roster listing and per-person facts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ministryctl.commands._base import MinistryGroup
from ministryctl.domain.calendar import ServiceTier
from ministryctl.domain.people import MemberStatus, UserType

if TYPE_CHECKING:
    from ministryctl.commands._context import AppContext


@click.group(
    cls=MinistryGroup,
    examples="""\
  ministryctl members list --status active
  ministryctl members list --tier Junior
  ministryctl members facts "Maria Grace Cruz\"""",
)
def members() -> None:
    """Roster listing, filters and derived facts."""


@members.command(
    "list",
    examples="""\
  ministryctl members list
  ministryctl members list --search cruz
  ministryctl members list --type admin
  ministryctl members list --tier "Senior Server\"""",
)
@click.option("--search", default=None, help="Substring of name, member number or email.")
@click.option(
    "--status",
    type=click.Choice([s.value for s in MemberStatus], case_sensitive=False),
    default=None,
    help="Filter by roster status.",
)
@click.option(
    "--type",
    "user_type",
    type=click.Choice([t.value for t in UserType], case_sensitive=False),
    default=None,
    help="Filter by admin or member.",
)
@click.option(
    "--tier",
    type=click.Choice([t.value for t in ServiceTier], case_sensitive=False),
    default=None,
    help="Filter by service tier (as of the reference date).",
)
@click.pass_obj
def list_cmd(
    app: AppContext,
    search: str | None,
    status: str | None,
    user_type: str | None,
    tier: str | None,
) -> None:
    """List roster entries with age, tenure and tier."""
    from ministryctl.services.members import MemberService

    result = MemberService(app.settings, app.clock).list_members(
        search=search, status=status, user_type=user_type, tier=tier
    )
    app.emit(result)


@members.command(
    examples="""\
  ministryctl members facts "Sarah Joy Kim"
  ministryctl --today 2026-06-21 members facts "sarah joy kim\"""",
)
@click.argument("name")
@click.pass_obj
def facts(app: AppContext, name: str) -> None:
    """Show age, next birthday, years of service and tier for NAME."""
    from ministryctl.services.members import MemberService

    app.emit(MemberService(app.settings, app.clock).facts(name))
