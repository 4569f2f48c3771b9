"""Monthly meeting attendance and dues marks.

Each member gets one :class:`AttendanceMark` per meeting.  Marks are
immutable; the ``toggle_*`` helpers return an updated copy, following the
rules of the attendance sheet:

- present and absent are mutually exclusive (setting one clears the other)
- excused is independent of present/absent
- checking "dues paid" fills in the default amount, unchecking zeroes it
- typing an amount at or above the default marks the dues as paid
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, Field

DEFAULT_DUE_AMOUNT = 20.0


class AttendanceMark(BaseModel):
    """Attendance and dues for one member at one meeting."""

    model_config = {"frozen": True}

    member: str = Field(min_length=1)
    present: bool = False
    absent: bool = False
    excused: bool = False
    excuse_letter: str = ""
    due_paid: bool = False
    due_amount: float = Field(default=0.0, ge=0)


def toggle_present(mark: AttendanceMark) -> AttendanceMark:
    return mark.model_copy(update={"present": not mark.present, "absent": False})


def toggle_absent(mark: AttendanceMark) -> AttendanceMark:
    return mark.model_copy(update={"absent": not mark.absent, "present": False})


def toggle_excused(mark: AttendanceMark) -> AttendanceMark:
    return mark.model_copy(update={"excused": not mark.excused})


def toggle_due(
    mark: AttendanceMark,
    default_amount: float = DEFAULT_DUE_AMOUNT,
) -> AttendanceMark:
    """Flip the dues checkbox; the amount follows the checkbox."""
    paid = not mark.due_paid
    return mark.model_copy(
        update={"due_paid": paid, "due_amount": default_amount if paid else 0.0}
    )


def set_due_amount(
    mark: AttendanceMark,
    amount: float,
    default_amount: float = DEFAULT_DUE_AMOUNT,
) -> AttendanceMark:
    """Record an explicit dues amount.

    An amount at or above *default_amount* marks the dues as paid; a
    smaller amount leaves the checkbox as it was.
    """
    if amount < 0:
        raise ValueError(f"Due amount must not be negative, got {amount}")
    paid = True if amount >= default_amount else mark.due_paid
    return mark.model_copy(update={"due_amount": float(amount), "due_paid": paid})


def with_excuse_letter(mark: AttendanceMark, text: str) -> AttendanceMark:
    return mark.model_copy(update={"excuse_letter": text})


@dataclass(frozen=True)
class AttendanceTotals:
    """Counts and dues collected across a meeting's marks."""

    present: int = 0
    absent: int = 0
    excused: int = 0
    dues_paid: int = 0
    total_amount: float = 0.0


def summarize_attendance(marks: Iterable[AttendanceMark]) -> AttendanceTotals:
    present = absent = excused = dues_paid = 0
    total = 0.0
    for mark in marks:
        present += mark.present
        absent += mark.absent
        excused += mark.excused
        dues_paid += mark.due_paid
        total += mark.due_amount
    return AttendanceTotals(
        present=present,
        absent=absent,
        excused=excused,
        dues_paid=dues_paid,
        total_amount=round(total, 2),
    )
