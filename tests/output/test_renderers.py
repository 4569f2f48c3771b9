"""Tests for the op-specific Rich renderers."""

from __future__ import annotations

from ministryctl.output.renderers import render_quiet, render_result
from ministryctl.services.result import ServiceError, ServiceResult


def _row(name: str, **extra: object) -> dict[str, object]:
    row: dict[str, object] = {
        "name": name,
        "age": 18,
        "is_birthday_today": False,
        "days_until_next_birthday": 2,
        "next_birthday": "2025-07-22",
        "next_age": 19,
        "years_of_service": 4,
        "service_tier": "Junior",
        "birth_date": "2006-07-22",
        "tenure_start_date": "2021-06-20",
        "user_type": "member",
        "status": "active",
        "position": None,
        "member_number": "1042",
    }
    row.update(extra)
    return row


class TestBirthdayRenderers:
    def test_upcoming_table(self) -> None:
        result = ServiceResult(
            ok=True,
            op="upcoming_birthdays",
            data={"window_days": 30, "items": [_row("Maria Grace Cruz")], "count": 1},
        )
        output = render_result(result)
        assert "Maria Grace Cruz" in output
        assert "July 22" in output
        assert "2d" in output
        assert "Junior" in output
        assert "1 upcoming in the next 30 days" in output

    def test_upcoming_today_label(self) -> None:
        item = _row("Maria", days_until_next_birthday=0, is_birthday_today=True)
        result = ServiceResult(
            ok=True, op="upcoming_birthdays", data={"window_days": 5, "items": [item], "count": 1}
        )
        assert "today" in render_result(result)

    def test_upcoming_empty(self) -> None:
        result = ServiceResult(
            ok=True, op="upcoming_birthdays", data={"window_days": 7, "items": [], "count": 0}
        )
        assert render_result(result) == "No birthdays in the next 7 days."

    def test_admin_shows_position(self) -> None:
        item = _row("Jose Reyes", user_type="admin", position="Coordinator", service_tier=None)
        result = ServiceResult(
            ok=True, op="upcoming_birthdays", data={"window_days": 30, "items": [item], "count": 1}
        )
        assert "Coordinator" in render_result(result)

    def test_month(self) -> None:
        result = ServiceResult(
            ok=True,
            op="birthdays_in_month",
            data={"month": 7, "month_name": "July", "items": [_row("Maria")], "count": 1},
        )
        output = render_result(result)
        assert "Birthdays in July" in output
        assert "Maria" in output

    def test_today_empty(self) -> None:
        result = ServiceResult(ok=True, op="birthdays_today", data={"items": [], "count": 0})
        assert render_result(result) == "No birthdays today."

    def test_today(self) -> None:
        result = ServiceResult(
            ok=True, op="birthdays_today", data={"items": [_row("Maria", age=19)], "count": 1}
        )
        output = render_result(result)
        assert "Maria" in output
        assert "turns 19 today" in output


class TestMemberRenderers:
    def test_list(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_members",
            data={"items": [_row("Maria"), _row("Ana", years_of_service=None)], "count": 2, "total": 4},
        )
        output = render_result(result)
        assert "Maria" in output
        assert "1042" in output
        assert "2 of 4 people" in output

    def test_facts_panel(self) -> None:
        result = ServiceResult(ok=True, op="member_facts", data=_row("Maria Grace Cruz"))
        output = render_result(result)
        assert "Maria Grace Cruz" in output
        assert "years of service: 4" in output
        assert "tier: Junior" in output
        assert "turning 19" in output


class TestMeetingRenderers:
    def test_anchor_default(self) -> None:
        result = ServiceResult(
            ok=True,
            op="meeting_anchor",
            data={
                "year": 2025,
                "month": 7,
                "month_name": "July",
                "date": "2025-07-06",
                "day": 6,
                "time": "12:00",
                "is_default_day": True,
                "editable": True,
            },
        )
        output = render_result(result)
        assert "2025-07-06" in output
        assert "first Sunday" in output

    def test_attendance(self) -> None:
        result = ServiceResult(
            ok=True,
            op="attendance_summary",
            data={
                "year": 2025,
                "month": 6,
                "month_name": "June",
                "meeting_date": "2025-06-01",
                "editable": False,
                "present": 1,
                "absent": 0,
                "excused": 0,
                "dues_paid": 1,
                "total_amount": 20.0,
                "items": [
                    {
                        "member": "Cruz, M.G.",
                        "attendance": "present",
                        "excused": False,
                        "due_paid": True,
                        "due_amount": 20.0,
                        "excuse_letter": "",
                    }
                ],
                "count": 1,
            },
        )
        output = render_result(result)
        assert "Cruz, M.G." in output
        assert "read-only" in output
        assert "total collected: 20.00" in output


class TestErrorsAndQuiet:
    def test_error(self) -> None:
        result = ServiceResult(
            ok=False,
            op="member_facts",
            error=ServiceError(code="NOT_FOUND", message="No roster entry named 'X'", detail={"n": 1}),
        )
        output = render_result(result)
        assert "ERROR" in output
        assert "No roster entry named 'X'" in output
        assert "detail" not in output
        assert "detail" in render_result(result, verbose=True)

    def test_verbose_meta(self) -> None:
        result = ServiceResult(ok=True, op="x", data={}, meta={"today": "2025-07-20"})
        assert "today: 2025-07-20" in render_result(result, verbose=True)

    def test_quiet_scalar(self) -> None:
        result = ServiceResult(ok=True, op="meeting_anchor", data={"date": "2025-07-06"})
        assert render_quiet(result) == "2025-07-06"

    def test_quiet_attendance_members(self) -> None:
        result = ServiceResult(
            ok=True, op="attendance_summary", data={"items": [{"member": "Cruz, M.G."}]}
        )
        assert render_quiet(result) == "Cruz, M.G."

    def test_quiet_fallback(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="x")) == "OK: x"
