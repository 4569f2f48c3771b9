"""BirthdayService — upcoming, monthly and same-day birthday listings."""

from __future__ import annotations

from ministryctl.domain.calendar import (
    birthdays_in_month,
    birthdays_today,
    upcoming_within,
)
from ministryctl.domain.dates import InvalidDate, month_name
from ministryctl.infrastructure.roster import RosterError
from ministryctl.services.base import BaseService
from ministryctl.services.result import ServiceResult


class BirthdayService(BaseService):
    """Birthday calendar queries over the configured roster."""

    def upcoming(
        self,
        window_days: int | None = None,
        *,
        include_today: bool = False,
    ) -> ServiceResult:
        """Birthdays in the next *window_days* days (config default if None)."""
        op = "upcoming_birthdays"
        warnings: list[str] = []
        window = self._settings.birthdays.window_days if window_days is None else window_days
        today = self._today()

        try:
            people = self._load_people(warnings)
            hits = upcoming_within(people, today, window, include_today=include_today)
        except RosterError as exc:
            return ServiceResult.failure(op, "ROSTER_ERROR", str(exc))
        except InvalidDate as exc:
            return ServiceResult.failure(op, "INVALID_DATE", str(exc))
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc), window_days=window)

        items = [self._person_row(person, today) for person, _days in hits]
        return ServiceResult(
            ok=True,
            op=op,
            data={"window_days": window, "items": items, "count": len(items)},
            warnings=warnings,
            meta=self._meta(today),
        )

    def in_month(self, month: int | None = None) -> ServiceResult:
        """Everyone born in *month* (default: the reference month)."""
        op = "birthdays_in_month"
        warnings: list[str] = []
        today = self._today()
        target = today.month if month is None else month

        try:
            label = month_name(target)
            people = self._load_people(warnings)
            matches = birthdays_in_month(people, target)
        except RosterError as exc:
            return ServiceResult.failure(op, "ROSTER_ERROR", str(exc))
        except InvalidDate as exc:
            return ServiceResult.failure(op, "INVALID_DATE", str(exc), month=target)

        items = [self._person_row(person, today) for person in matches]
        return ServiceResult(
            ok=True,
            op=op,
            data={"month": target, "month_name": label, "items": items, "count": len(items)},
            warnings=warnings,
            meta=self._meta(today),
        )

    def today(self) -> ServiceResult:
        """Everyone whose birthday is the reference date."""
        op = "birthdays_today"
        warnings: list[str] = []
        today = self._today()

        try:
            people = self._load_people(warnings)
        except RosterError as exc:
            return ServiceResult.failure(op, "ROSTER_ERROR", str(exc))

        items = [self._person_row(person, today) for person in birthdays_today(people, today)]
        return ServiceResult(
            ok=True,
            op=op,
            data={"items": items, "count": len(items)},
            warnings=warnings,
            meta=self._meta(today),
        )
