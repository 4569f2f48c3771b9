"""Tests for CalendarDate validation and coercion."""

from __future__ import annotations

from datetime import date, datetime

import pytest

from ministryctl.domain.dates import (
    CalendarDate,
    InvalidDate,
    coerce_date,
    days_in_month,
    is_leap_year,
    month_name,
    validate_month,
)


class TestCalendarDate:
    def test_valid_date(self) -> None:
        d = CalendarDate(2025, 7, 22)
        assert (d.year, d.month, d.day) == (2025, 7, 22)
        assert d.isoformat() == "2025-07-22"
        assert str(d) == "2025-07-22"

    def test_leap_day_only_in_leap_years(self) -> None:
        assert CalendarDate(2024, 2, 29).day == 29
        with pytest.raises(InvalidDate):
            CalendarDate(2025, 2, 29)

    def test_century_rule(self) -> None:
        assert CalendarDate(2000, 2, 29).day == 29
        with pytest.raises(InvalidDate):
            CalendarDate(1900, 2, 29)

    @pytest.mark.parametrize(
        ("year", "month", "day"),
        [(2025, 0, 1), (2025, 13, 1), (2025, 4, 31), (2025, 1, 0), (0, 1, 1)],
    )
    def test_out_of_range_raises(self, year: int, month: int, day: int) -> None:
        with pytest.raises(InvalidDate):
            CalendarDate(year, month, day)

    def test_non_integer_parts_rejected(self) -> None:
        with pytest.raises(InvalidDate):
            CalendarDate(2025, "7", 1)  # type: ignore[arg-type]
        with pytest.raises(InvalidDate):
            CalendarDate(2025, True, 1)  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        d = CalendarDate(2025, 1, 1)
        with pytest.raises(AttributeError):
            d.day = 2  # type: ignore[misc]

    def test_ordering(self) -> None:
        assert CalendarDate(2024, 12, 31) < CalendarDate(2025, 1, 1)
        assert CalendarDate(2025, 2, 3) > CalendarDate(2025, 1, 31)

    def test_date_round_trip(self) -> None:
        d = CalendarDate.from_date(date(2026, 2, 1))
        assert d.to_date() == date(2026, 2, 1)


class TestParse:
    def test_iso(self) -> None:
        assert CalendarDate.parse("2005-02-03") == CalendarDate(2005, 2, 3)

    def test_surrounding_whitespace(self) -> None:
        assert CalendarDate.parse(" 2005-02-03 ") == CalendarDate(2005, 2, 3)

    @pytest.mark.parametrize("text", ["2005-2-3", "03/02/2005", "", "2005-02-30"])
    def test_bad_text(self, text: str) -> None:
        with pytest.raises(InvalidDate):
            CalendarDate.parse(text)


class TestCoerceDate:
    def test_accepts_date(self) -> None:
        assert coerce_date(date(2025, 7, 1)) == CalendarDate(2025, 7, 1)

    def test_accepts_string_and_tuple(self) -> None:
        assert coerce_date("2025-07-01") == CalendarDate(2025, 7, 1)
        assert coerce_date((2025, 7, 1)) == CalendarDate(2025, 7, 1)

    def test_passes_calendar_date(self) -> None:
        d = CalendarDate(2025, 7, 1)
        assert coerce_date(d) == d

    def test_rejects_datetime(self) -> None:
        with pytest.raises(InvalidDate, match="datetime"):
            coerce_date(datetime(2025, 7, 1, 12, 0))

    def test_rejects_invalid_tuple(self) -> None:
        with pytest.raises(InvalidDate):
            coerce_date((2025, 2, 29))

    def test_rejects_other_types(self) -> None:
        with pytest.raises(InvalidDate):
            coerce_date(20250701)

    def test_invalid_date_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            coerce_date("nope")


class TestMonthHelpers:
    def test_is_leap_year(self) -> None:
        assert is_leap_year(2024)
        assert not is_leap_year(2025)
        assert is_leap_year(2000)
        assert not is_leap_year(2100)

    def test_days_in_month(self) -> None:
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2025, 2) == 28
        assert days_in_month(2025, 4) == 30
        assert days_in_month(2025, 12) == 31

    def test_month_name(self) -> None:
        assert month_name(1) == "January"
        assert month_name(12) == "December"

    @pytest.mark.parametrize("month", [0, 13, -1])
    def test_validate_month_rejects(self, month: int) -> None:
        with pytest.raises(InvalidDate):
            validate_month(month)
