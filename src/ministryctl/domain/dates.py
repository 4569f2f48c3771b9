"""Civil calendar dates and their validation.

A :class:`CalendarDate` is a wall-clock date with no time-of-day or
timezone.  It is validated against the proleptic Gregorian calendar on
construction, so an instance that exists is always a real day.

INVARIANT: invalid input raises :class:`InvalidDate`; nothing is clamped.
"""

from __future__ import annotations

import calendar
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Self

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

MAX_YEAR = 9999

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


class InvalidDate(ValueError):
    """Raised when a value is not a valid calendar date."""


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return calendar.isleap(year)


def validate_month(month: int) -> int:
    """Return *month* unchanged, or raise InvalidDate if it is outside 1..12."""
    if isinstance(month, bool) or not isinstance(month, int):
        raise InvalidDate(f"Month must be an integer, got {month!r}")
    if not 1 <= month <= 12:
        raise InvalidDate(f"Month out of range: {month}")
    return month


def days_in_month(year: int, month: int) -> int:
    """Number of days in *month* of *year*, honouring leap years."""
    validate_month(month)
    return calendar.monthrange(year, month)[1]


def month_name(month: int) -> str:
    """English month name for *month* (1-based)."""
    return MONTH_NAMES[validate_month(month) - 1]


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable civil date ordered by ``(year, month, day)``."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name in ("year", "month", "day"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidDate(f"{name} must be an integer, got {value!r}")
        if not 1 <= self.year <= MAX_YEAR:
            raise InvalidDate(f"Year out of range: {self.year}")
        validate_month(self.month)
        last = days_in_month(self.year, self.month)
        if not 1 <= self.day <= last:
            raise InvalidDate(
                f"Day out of range for {self.year:04d}-{self.month:02d}: {self.day}"
            )

    @classmethod
    def from_date(cls, value: date) -> Self:
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse an ISO ``YYYY-MM-DD`` string."""
        match = _ISO_DATE.match(text.strip())
        if match is None:
            raise InvalidDate(f"Not an ISO date (YYYY-MM-DD): {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()


def coerce_date(value: Any) -> CalendarDate:
    """Convert *value* into a validated :class:`CalendarDate`.

    Accepts a CalendarDate, a ``datetime.date`` (but not a ``datetime``,
    which carries a time-of-day), an ISO string, or a ``(y, m, d)`` tuple.
    """
    if isinstance(value, CalendarDate):
        # Re-run validation in case the instance was built around __init__.
        return CalendarDate(value.year, value.month, value.day)
    if isinstance(value, datetime):
        raise InvalidDate(f"Expected a calendar date, got a datetime: {value!r}")
    if isinstance(value, date):
        return CalendarDate.from_date(value)
    if isinstance(value, str):
        return CalendarDate.parse(value)
    if isinstance(value, tuple) and len(value) == 3:
        return CalendarDate(*value)
    raise InvalidDate(f"Cannot interpret {value!r} as a calendar date")
