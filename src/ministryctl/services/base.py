"""BaseService — shared foundation for ministryctl services.

Every service receives the frozen :class:`MinistrySettings` and a
:class:`Clock`.  The clock is consulted once per operation and the
resulting date is passed explicitly into the domain functions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ministryctl.domain.calendar import TierThresholds, derive_facts
from ministryctl.domain.people import display_name
from ministryctl.infrastructure.clock import Clock, clock_for
from ministryctl.infrastructure.roster import load_roster

if TYPE_CHECKING:
    from ministryctl.config.settings import MinistrySettings
    from ministryctl.domain.dates import CalendarDate
    from ministryctl.domain.people import PersonRecord

logger = logging.getLogger(__name__)


class BaseService:
    """Base for roster-backed services.

    Usage::

        class BirthdayService(BaseService):
            def upcoming(self) -> ServiceResult:
                today = self._today()
                people = self._load_people(warnings)
                ...
    """

    def __init__(self, settings: MinistrySettings, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock = clock if clock is not None else clock_for(settings.today)

    @property
    def thresholds(self) -> TierThresholds:
        return self._settings.tiers.thresholds()

    def _today(self) -> CalendarDate:
        return self._clock.today()

    def _load_people(self, warnings: list[str]) -> tuple[PersonRecord, ...]:
        """Load the configured roster, turning skipped entries into warnings.

        Raises RosterError when the roster file itself is unusable.
        """
        loaded = load_roster(self._settings.roster_path)
        logger.debug(
            "roster %s: %d people, %d skipped",
            self._settings.roster_path,
            len(loaded.people),
            len(loaded.skipped),
        )
        for index, message in loaded.skipped:
            warnings.append(f"Skipped roster entry {index}: {message}")
        return loaded.people

    def _meta(self, today: CalendarDate) -> dict[str, Any]:
        return {"today": today.isoformat(), "roster": str(self._settings.roster_path)}

    def _person_row(self, person: PersonRecord, today: CalendarDate) -> dict[str, Any]:
        """Roster attributes merged with the person's derived facts."""
        row = derive_facts(person, today, self.thresholds).to_dict()
        row.update(
            display_name=display_name(person),
            birth_date=person.birth_date.isoformat(),
            tenure_start_date=(
                person.tenure_start_date.isoformat() if person.tenure_start_date else None
            ),
            user_type=str(person.user_type),
            status=str(person.status),
            position=person.position,
            member_number=person.member_number,
        )
        return row
