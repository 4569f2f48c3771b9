"""Roster filtering — search, status, user type and tier filters."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ministryctl.domain.calendar import (
    DEFAULT_TIER_THRESHOLDS,
    ServiceTier,
    TierThresholds,
    classify_service_tier,
    compute_years_of_service,
)
from ministryctl.domain.people import MemberStatus, PersonRecord, UserType


def matches_search(person: PersonRecord, term: str) -> bool:
    """Case-insensitive substring match on name, member number or email."""
    needle = term.strip().lower()
    if not needle:
        return True
    haystacks = (person.name, person.member_number, person.email)
    return any(needle in h.lower() for h in haystacks if h)


def tier_of(
    person: PersonRecord,
    today: Any,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
) -> ServiceTier | None:
    """Tier of *person* as of *today*, or None without a tenure start date."""
    if person.tenure_start_date is None:
        return None
    years = compute_years_of_service(person.tenure_start_date, today)
    return classify_service_tier(years, thresholds)


def filter_people(
    people: Iterable[PersonRecord],
    *,
    search: str | None = None,
    status: MemberStatus | None = None,
    user_type: UserType | None = None,
    tier: ServiceTier | None = None,
    today: Any = None,
    thresholds: TierThresholds = DEFAULT_TIER_THRESHOLDS,
) -> list[PersonRecord]:
    """Apply every given filter; input order is preserved.

    Filtering by *tier* requires *today*, since tiers change with time.
    """
    if tier is not None and today is None:
        raise ValueError("Filtering by tier requires a reference date")

    result: list[PersonRecord] = []
    for person in people:
        if search and not matches_search(person, search):
            continue
        if status is not None and person.status != status:
            continue
        if user_type is not None and person.user_type != user_type:
            continue
        if tier is not None and tier_of(person, today, thresholds) != tier:
            continue
        result.append(person)
    return result
