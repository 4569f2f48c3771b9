"""MemberService — roster listing with filters and per-person facts."""

from __future__ import annotations

from ministryctl.domain.calendar import ServiceTier
from ministryctl.domain.dates import InvalidDate
from ministryctl.domain.people import MemberStatus, UserType
from ministryctl.domain.roster import filter_people
from ministryctl.infrastructure.roster import RosterError
from ministryctl.services.base import BaseService
from ministryctl.services.result import ServiceResult


class MemberService(BaseService):
    """Roster queries: filtered listings and single-person lookups."""

    def list_members(
        self,
        *,
        search: str | None = None,
        status: str | None = None,
        user_type: str | None = None,
        tier: str | None = None,
    ) -> ServiceResult:
        op = "list_members"
        warnings: list[str] = []
        today = self._today()

        try:
            status_filter = MemberStatus(status.lower()) if status else None
            type_filter = UserType(user_type.lower()) if user_type else None
            tier_filter = ServiceTier(tier) if tier else None
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc))

        try:
            people = self._load_people(warnings)
            matches = filter_people(
                people,
                search=search,
                status=status_filter,
                user_type=type_filter,
                tier=tier_filter,
                today=today,
                thresholds=self.thresholds,
            )
        except RosterError as exc:
            return ServiceResult.failure(op, "ROSTER_ERROR", str(exc))
        except InvalidDate as exc:
            return ServiceResult.failure(op, "INVALID_DATE", str(exc))

        items = [self._person_row(person, today) for person in matches]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items), "total": len(people)},
            warnings=warnings,
            meta=self._meta(today),
        )

    def facts(self, name: str) -> ServiceResult:
        """Derived facts for the person whose name matches *name* exactly.

        Matching ignores case and surrounding whitespace.
        """
        op = "member_facts"
        warnings: list[str] = []
        today = self._today()
        wanted = name.strip().casefold()

        try:
            people = self._load_people(warnings)
        except RosterError as exc:
            return ServiceResult.failure(op, "ROSTER_ERROR", str(exc))

        matches = [p for p in people if p.name.casefold() == wanted]
        if not matches:
            return ServiceResult.failure(op, "NOT_FOUND", f"No roster entry named '{name}'")
        if len(matches) > 1:
            warnings.append(f"{len(matches)} roster entries share the name '{name}'; using the first")

        return ServiceResult(
            ok=True,
            op=op,
            data=self._person_row(matches[0], today),
            warnings=warnings,
            meta=self._meta(today),
        )
