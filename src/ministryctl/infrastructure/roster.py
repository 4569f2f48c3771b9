"""Read-only YAML roster and attendance sheet loading.

A roster is a YAML document with a top-level ``people`` list::

    people:
      - name: Maria Grace Cruz
        birth_date: 2006-07-22
        tenure_start_date: 2021-06-20
        user_type: member

Malformed people are skipped and reported, so one bad birth date does not
hide the rest of the roster.  Attendance sheets (top-level ``attendance``)
are all-or-nothing: a bad row raises, because dues totals must never
silently drop money.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.constructor import SafeConstructor
from ruamel.yaml.error import YAMLError

from ministryctl.domain.attendance import AttendanceMark
from ministryctl.domain.people import PersonRecord

logger = logging.getLogger(__name__)


class RosterError(Exception):
    """Raised when a roster or attendance file cannot be used at all."""


class _DateAsTextConstructor(SafeConstructor):
    """Safe constructor that leaves YAML timestamps as plain strings.

    Dates then go through the record validators, so an impossible date
    such as 2001-02-29 rejects only its own record.
    """


_DateAsTextConstructor.add_constructor(
    "tag:yaml.org,2002:timestamp", SafeConstructor.construct_yaml_str
)


@dataclass(frozen=True)
class RosterLoad:
    """People read from a roster plus the records that were skipped."""

    people: tuple[PersonRecord, ...]
    skipped: tuple[tuple[int, str], ...] = field(default_factory=tuple)


def _describe(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _read_list(path: Path, key: str) -> list[Any]:
    """Load *path* and return the list stored under top-level *key*."""
    if not path.is_file():
        raise RosterError(f"File not found: {path}")
    yaml = YAML(typ="safe")
    yaml.Constructor = _DateAsTextConstructor
    try:
        data = yaml.load(path.read_text(encoding="utf-8"))
    except (YAMLError, ValueError) as exc:
        raise RosterError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return []
    if not isinstance(data, dict) or key not in data:
        raise RosterError(f"{path} must contain a top-level '{key}' list")
    items = data[key]
    if items is None:
        return []
    if not isinstance(items, list):
        raise RosterError(f"{path} must contain a top-level '{key}' list")
    return list(items)


def load_roster(path: Path) -> RosterLoad:
    """Parse the roster at *path* into :class:`PersonRecord` values."""
    people: list[PersonRecord] = []
    skipped: list[tuple[int, str]] = []
    for index, raw in enumerate(_read_list(path, "people")):
        if not isinstance(raw, dict):
            skipped.append((index, "entry is not a mapping"))
            continue
        try:
            people.append(PersonRecord.model_validate(raw))
        except ValidationError as exc:
            skipped.append((index, _describe(exc)))

    for index, message in skipped:
        logger.warning("Skipping roster entry %d in %s: %s", index, path, message)
    logger.debug("Loaded %d people from %s", len(people), path)
    return RosterLoad(people=tuple(people), skipped=tuple(skipped))


def load_attendance(path: Path) -> list[AttendanceMark]:
    """Parse the attendance sheet at *path*; any malformed row is fatal."""
    marks: list[AttendanceMark] = []
    for index, raw in enumerate(_read_list(path, "attendance")):
        if not isinstance(raw, dict):
            raise RosterError(f"Attendance row {index} in {path} is not a mapping")
        try:
            marks.append(AttendanceMark.model_validate(raw))
        except ValidationError as exc:
            raise RosterError(f"Attendance row {index} in {path}: {_describe(exc)}") from exc
    return marks
