"""Monthly meeting schedule.

The default meeting falls on the first Sunday of the month at a fixed
time.  INVARIANT: the default is always recomputed from the target
year/month, never carried over from another month.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Any

from ministryctl.domain.calendar import first_sunday_of_month
from ministryctl.domain.dates import CalendarDate, coerce_date

DEFAULT_MEETING_TIME = "12:00"

_TIME = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def validate_time(value: str) -> str:
    """Return *value* if it is a 24-hour ``HH:MM`` time."""
    if not _TIME.match(value):
        raise ValueError(f"Meeting time must be HH:MM (24-hour), got {value!r}")
    return value


@dataclass(frozen=True)
class MeetingSchedule:
    """Date and time of one month's meeting."""

    date: CalendarDate
    time: str = DEFAULT_MEETING_TIME

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def is_default_day(self) -> bool:
        """True when the meeting falls on the first Sunday."""
        return self.day == first_sunday_of_month(self.date.year, self.date.month)


def default_meeting(year: int, month: int, time: str = DEFAULT_MEETING_TIME) -> MeetingSchedule:
    """First-Sunday meeting for *year*/*month*."""
    day = first_sunday_of_month(year, month)
    return MeetingSchedule(
        date=CalendarDate(year, month, day),
        time=validate_time(time),
    )


def reschedule(
    schedule: MeetingSchedule,
    day: int | None = None,
    time: str | None = None,
) -> MeetingSchedule:
    """Override the day and/or time within the same month.

    Raises InvalidDate when *day* does not exist in the schedule's month.
    """
    new_date = schedule.date
    if day is not None:
        new_date = CalendarDate(schedule.date.year, schedule.date.month, day)
    new_time = validate_time(time) if time is not None else schedule.time
    return replace(schedule, date=new_date, time=new_time)


def is_editable(year: int, month: int, today: Any) -> bool:
    """Attendance for a meeting may only be edited during its own month."""
    ref = coerce_date(today)
    return (ref.year, ref.month) == (year, month)
