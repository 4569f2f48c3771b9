"""Person records supplied by callers of the calendar library.

A :class:`PersonRecord` is the only input the calendar functions need
about a person: a display name, a date of birth, and an optional date of
investiture.  The remaining attributes come from the roster and are used
for filtering and display only.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, field_validator, model_validator

from ministryctl.domain.dates import CalendarDate, coerce_date


class UserType(StrEnum):
    """Whether a person is a portal administrator or a ministry member."""

    ADMIN = "admin"
    MEMBER = "member"


class MemberStatus(StrEnum):
    """Roster status of a member."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    ALUMNI = "alumni"


class PersonRecord(BaseModel):
    """Name, date of birth, and optional tenure start of one person."""

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    name: str
    birth_date: CalendarDate
    tenure_start_date: CalendarDate | None = None

    surname: str | None = None
    given_name: str | None = None
    member_number: str | None = None
    email: str | None = None
    user_type: UserType = UserType.MEMBER
    position: str | None = None
    status: MemberStatus = MemberStatus.ACTIVE

    @model_validator(mode="before")
    @classmethod
    def _fill_name(cls, data: Any) -> Any:
        """Build ``name`` from given name and surname when it is missing."""
        if isinstance(data, dict) and not data.get("name"):
            parts = [data.get("given_name"), data.get("surname")]
            joined = " ".join(str(p).strip() for p in parts if p)
            if joined:
                data = {**data, "name": joined}
        return data

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value

    @field_validator("birth_date", mode="before")
    @classmethod
    def _coerce_birth_date(cls, value: Any) -> CalendarDate:
        return coerce_date(value)

    @field_validator("tenure_start_date", mode="before")
    @classmethod
    def _coerce_tenure_start(cls, value: Any) -> CalendarDate | None:
        if value is None or value == "":
            return None
        return coerce_date(value)

    @field_validator("member_number", mode="before")
    @classmethod
    def _stringify_member_number(cls, value: Any) -> Any:
        # YAML reads bare numbers like 1042 as int.
        return str(value) if isinstance(value, int) and not isinstance(value, bool) else value

    @field_validator("user_type", "status", mode="before")
    @classmethod
    def _lowercase_enum(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value


def format_member_name(surname: str, given_name: str) -> str:
    """Format a name as ``"Surname, I."`` for attendance sheets.

    Each given name contributes its uppercased initial; initials are joined
    with dots, e.g. ``format_member_name("Cruz", "maria grace") == "Cruz, M.G."``.
    """
    initials = [part[0].upper() for part in given_name.split() if part]
    if not initials:
        return surname.strip()
    return f"{surname.strip()}, {'.'.join(initials)}."


def display_name(person: PersonRecord) -> str:
    """Sheet-style name when surname and given name are known, else ``name``."""
    if person.surname and person.given_name:
        return format_member_name(person.surname, person.given_name)
    return person.name
