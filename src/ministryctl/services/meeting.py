"""MeetingService — monthly meeting date and attendance/dues summaries."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ministryctl.domain.attendance import AttendanceMark, summarize_attendance
from ministryctl.domain.dates import InvalidDate, month_name
from ministryctl.domain.meeting import MeetingSchedule, default_meeting, is_editable, reschedule
from ministryctl.infrastructure.roster import RosterError, load_attendance
from ministryctl.services.base import BaseService
from ministryctl.services.result import ServiceResult


def _mark_row(mark: AttendanceMark) -> dict[str, Any]:
    if mark.present:
        state = "present"
    elif mark.absent:
        state = "absent"
    else:
        state = "unmarked"
    return {
        "member": mark.member,
        "attendance": state,
        "excused": mark.excused,
        "due_paid": mark.due_paid,
        "due_amount": mark.due_amount,
        "excuse_letter": mark.excuse_letter,
    }


class MeetingService(BaseService):
    """Meeting anchor computation and attendance sheet totals."""

    def _schedule(
        self,
        year: int | None,
        month: int | None,
        day: int | None = None,
        time: str | None = None,
    ) -> MeetingSchedule:
        today = self._today()
        schedule = default_meeting(
            today.year if year is None else year,
            today.month if month is None else month,
            self._settings.meeting.default_time,
        )
        if day is not None or time is not None:
            schedule = reschedule(schedule, day=day, time=time)
        return schedule

    def anchor(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
        time: str | None = None,
    ) -> ServiceResult:
        """Meeting date for a month: first Sunday unless *day* overrides it.

        Missing *year*/*month* default to the reference date's.
        """
        op = "meeting_anchor"
        today = self._today()
        try:
            schedule = self._schedule(year, month, day, time)
        except InvalidDate as exc:
            return ServiceResult.failure(op, "INVALID_DATE", str(exc))
        except ValueError as exc:
            return ServiceResult.failure(op, "INVALID_ARGUMENT", str(exc))

        meeting_date = schedule.date
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "year": meeting_date.year,
                "month": meeting_date.month,
                "month_name": month_name(meeting_date.month),
                "date": meeting_date.isoformat(),
                "day": schedule.day,
                "time": schedule.time,
                "is_default_day": schedule.is_default_day,
                "editable": is_editable(meeting_date.year, meeting_date.month, today),
            },
            meta={"today": today.isoformat()},
        )

    def attendance(
        self,
        sheet: Path,
        year: int | None = None,
        month: int | None = None,
    ) -> ServiceResult:
        """Totals for an attendance sheet of the given meeting month."""
        op = "attendance_summary"
        warnings: list[str] = []
        today = self._today()

        try:
            schedule = self._schedule(year, month)
            marks = load_attendance(sheet)
        except InvalidDate as exc:
            return ServiceResult.failure(op, "INVALID_DATE", str(exc))
        except RosterError as exc:
            return ServiceResult.failure(op, "ROSTER_ERROR", str(exc))

        due = self._settings.meeting.default_due_amount
        for mark in marks:
            if mark.present and mark.absent:
                warnings.append(f"{mark.member} is marked both present and absent")
            if mark.due_paid and mark.due_amount < due:
                warnings.append(f"{mark.member} marked paid with {mark.due_amount:.2f} < {due:.2f}")

        totals = summarize_attendance(marks)
        meeting_date = schedule.date
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "year": meeting_date.year,
                "month": meeting_date.month,
                "month_name": month_name(meeting_date.month),
                "meeting_date": meeting_date.isoformat(),
                "editable": is_editable(meeting_date.year, meeting_date.month, today),
                "present": totals.present,
                "absent": totals.absent,
                "excused": totals.excused,
                "dues_paid": totals.dues_paid,
                "total_amount": totals.total_amount,
                "items": [_mark_row(mark) for mark in marks],
                "count": len(marks),
            },
            warnings=warnings,
            meta={"today": today.isoformat(), "sheet": str(sheet)},
        )
