"""Reference-date sources.

This is the only place the host clock is read.  Services receive a
:class:`Clock` and pass the date it returns into the pure domain
functions.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol

from ministryctl.domain.dates import CalendarDate


class Clock(Protocol):
    def today(self) -> CalendarDate:
        """Return the reference date."""
        ...


class SystemClock:
    def today(self) -> CalendarDate:
        return CalendarDate.from_date(date.today())


class FixedClock:
    """Clock pinned to a single date (``--today`` and tests)."""

    def __init__(self, value: CalendarDate | date) -> None:
        if isinstance(value, date):
            value = CalendarDate.from_date(value)
        self._value = value

    def today(self) -> CalendarDate:
        return self._value


def clock_for(override: date | None) -> Clock:
    """FixedClock when an override date is configured, else the host clock."""
    return FixedClock(override) if override is not None else SystemClock()
