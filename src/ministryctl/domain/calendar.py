"""Calendar and tenure arithmetic for birthdays, service tiers and meetings.

Every function is pure: the reference "today" is always an argument and
is never read from the host clock here.  Date arguments go through
:func:`~ministryctl.domain.dates.coerce_date`, so malformed input raises
:class:`~ministryctl.domain.dates.InvalidDate` before any arithmetic.

Feb 29 birthdays are observed on March 1 in non-leap years.  That is the
same day :func:`compute_age` increments the age (it compares month/day
lexicographically), so birthday detection and age always agree.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from ministryctl.domain.dates import (
    MAX_YEAR,
    CalendarDate,
    InvalidDate,
    coerce_date,
    is_leap_year,
    validate_month,
)
from ministryctl.domain.people import PersonRecord

# --- Service tiers ---


class ServiceTier(StrEnum):
    """Tier label derived from completed years of service."""

    NEOPHYTE = "Neophyte"
    JUNIOR = "Junior"
    SENIOR_SERVER = "Senior Server"


JUNIOR_MIN_YEARS = 3
SENIOR_SERVER_MIN_YEARS = 5


@dataclass(frozen=True)
class TierThresholds:
    """Inclusive lower bounds (in completed years) of the upper two tiers."""

    junior_min_years: int = JUNIOR_MIN_YEARS
    senior_server_min_years: int = SENIOR_SERVER_MIN_YEARS

    def __post_init__(self) -> None:
        if self.junior_min_years < 1:
            raise ValueError("junior_min_years must be at least 1")
        if self.senior_server_min_years <= self.junior_min_years:
            raise ValueError("senior_server_min_years must exceed junior_min_years")


DEFAULT_TIER_THRESHOLDS = TierThresholds()


# --- Derived facts ---


@dataclass(frozen=True)
class DerivedFacts:
    """Facts computed for one person as of a reference date."""

    name: str
    age: int
    is_birthday_today: bool
    days_until_next_birthday: int
    next_birthday: CalendarDate
    next_age: int
    years_of_service: int | None = None
    service_tier: ServiceTier | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "age": self.age,
            "is_birthday_today": self.is_birthday_today,
            "days_until_next_birthday": self.days_until_next_birthday,
            "next_birthday": self.next_birthday.isoformat(),
            "next_age": self.next_age,
            "years_of_service": self.years_of_service,
            "service_tier": str(self.service_tier) if self.service_tier else None,
        }


# --- Completed years ---


def _completed_years(start: CalendarDate, today: CalendarDate) -> int:
    years = today.year - start.year
    if (today.month, today.day) < (start.month, start.day):
        years -= 1
    return max(years, 0)


def compute_age(birth_date: Any, today: Any) -> int:
    """Completed years between *birth_date* and *today* (never negative)."""
    return _completed_years(coerce_date(birth_date), coerce_date(today))


def compute_years_of_service(tenure_start_date: Any, today: Any) -> int:
    """Completed years since investiture, 0 for a future start date."""
    return _completed_years(coerce_date(tenure_start_date), coerce_date(today))


# --- Birthdays ---


def _observed_birthday(birth: CalendarDate, year: int) -> CalendarDate:
    """The day *birth* is celebrated in *year* (Feb 29 moves to Mar 1)."""
    if (birth.month, birth.day) == (2, 29) and not is_leap_year(year):
        return CalendarDate(year, 3, 1)
    return CalendarDate(year, birth.month, birth.day)


def is_birthday_today(birth_date: Any, today: Any) -> bool:
    """True when *today* is the observed birthday in *today*'s year."""
    birth = coerce_date(birth_date)
    ref = coerce_date(today)
    return _observed_birthday(birth, ref.year) == ref


def next_birthday(birth_date: Any, today: Any) -> CalendarDate:
    """The next observed birthday on or after *today*.

    Raises InvalidDate when that birthday would fall after year 9999, the
    last year a CalendarDate can hold.
    """
    birth = coerce_date(birth_date)
    ref = coerce_date(today)
    candidate = _observed_birthday(birth, ref.year)
    if candidate < ref:
        if ref.year >= MAX_YEAR:
            raise InvalidDate(f"Next birthday after {ref} falls beyond year {MAX_YEAR}")
        candidate = _observed_birthday(birth, ref.year + 1)
    return candidate


def days_until_next_birthday(birth_date: Any, today: Any) -> int:
    """Whole days from *today* to the next birthday; 0 on the birthday."""
    ref = coerce_date(today)
    target = next_birthday(birth_date, ref)
    return (target.to_date() - ref.to_date()).days


# --- Tiers ---


def classify_service_tier(
    years_of_service: int,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
) -> ServiceTier:
    """Map completed years of service onto a tier (inclusive lower bounds)."""
    if years_of_service < 0:
        raise ValueError(f"years_of_service must be non-negative, got {years_of_service}")
    if years_of_service >= thresholds.senior_server_min_years:
        return ServiceTier.SENIOR_SERVER
    if years_of_service >= thresholds.junior_min_years:
        return ServiceTier.JUNIOR
    return ServiceTier.NEOPHYTE


# --- Meeting anchor ---


def first_sunday_of_month(year: int, month: int) -> int:
    """Day of month (1..7) of the first Sunday of *month* in *year*."""
    first = CalendarDate(year, validate_month(month), 1)
    # date.weekday() is Monday=0; shift so Sunday=0.
    days_past_sunday = (first.to_date().weekday() + 1) % 7
    if days_past_sunday == 0:
        return 1
    return 1 + (7 - days_past_sunday)


def meeting_anchor(year: int, month: int) -> CalendarDate:
    """The full date of the default monthly meeting (first Sunday)."""
    return CalendarDate(year, month, first_sunday_of_month(year, month))


# --- Composition ---


def derive_facts(
    person: PersonRecord,
    today: Any,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
) -> DerivedFacts:
    """Compute every derived fact for *person* as of *today*.

    The tier is recomputed from years of service on every call.
    """
    ref = coerce_date(today)
    age = compute_age(person.birth_date, ref)
    birthday_today = is_birthday_today(person.birth_date, ref)
    upcoming = next_birthday(person.birth_date, ref)

    years: int | None = None
    tier: ServiceTier | None = None
    if person.tenure_start_date is not None:
        years = compute_years_of_service(person.tenure_start_date, ref)
        tier = classify_service_tier(years, thresholds)

    return DerivedFacts(
        name=person.name,
        age=age,
        is_birthday_today=birthday_today,
        days_until_next_birthday=(upcoming.to_date() - ref.to_date()).days,
        next_birthday=upcoming,
        next_age=age if birthday_today else compute_age(person.birth_date, upcoming),
        years_of_service=years,
        service_tier=tier,
    )


def upcoming_within(
    people: Iterable[PersonRecord],
    today: Any,
    window_days: int,
    *,
    include_today: bool = False,
) -> tuple[tuple[PersonRecord, int], ...]:
    """People whose next birthday falls within *window_days* of *today*.

    Birthdays being celebrated today are excluded unless *include_today*.
    Ordered by days ascending, then by name.
    """
    if window_days < 0:
        raise ValueError(f"window_days must be non-negative, got {window_days}")
    ref = coerce_date(today)
    hits: list[tuple[PersonRecord, int]] = []
    for person in people:
        days = days_until_next_birthday(person.birth_date, ref)
        if days > window_days:
            continue
        if days == 0 and not include_today:
            continue
        hits.append((person, days))
    hits.sort(key=lambda hit: (hit[1], hit[0].name))
    return tuple(hits)


def birthdays_in_month(
    people: Iterable[PersonRecord],
    month: int,
) -> tuple[PersonRecord, ...]:
    """People born in *month*, ordered by day of month then by name."""
    validate_month(month)
    matches = [p for p in people if p.birth_date.month == month]
    matches.sort(key=lambda p: (p.birth_date.day, p.name))
    return tuple(matches)


def birthdays_today(
    people: Iterable[PersonRecord],
    today: Any,
) -> tuple[PersonRecord, ...]:
    """People celebrating on *today*, ordered by name."""
    ref = coerce_date(today)
    matches = [p for p in people if is_birthday_today(p.birth_date, ref)]
    matches.sort(key=lambda p: p.name)
    return tuple(matches)
