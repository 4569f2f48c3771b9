"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ministry.toml only contains
overrides.  A fresh ministry needs only ``[roster] path``.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator, model_validator

from ministryctl.domain.attendance import DEFAULT_DUE_AMOUNT
from ministryctl.domain.calendar import (
    JUNIOR_MIN_YEARS,
    SENIOR_SERVER_MIN_YEARS,
    TierThresholds,
)
from ministryctl.domain.meeting import DEFAULT_MEETING_TIME, validate_time


class RosterConfig(BaseModel):
    """[roster] section."""

    model_config = {"frozen": True}

    path: str = "roster.yaml"


class BirthdaysConfig(BaseModel):
    """[birthdays] section."""

    model_config = {"frozen": True}

    window_days: int = Field(default=30, ge=0, le=366)


class TiersConfig(BaseModel):
    """[tiers] section — inclusive lower bounds in completed years."""

    model_config = {"frozen": True}

    junior_min_years: int = JUNIOR_MIN_YEARS
    senior_server_min_years: int = SENIOR_SERVER_MIN_YEARS

    @model_validator(mode="after")
    def _check_order(self) -> TiersConfig:
        self.thresholds()
        return self

    def thresholds(self) -> TierThresholds:
        return TierThresholds(
            junior_min_years=self.junior_min_years,
            senior_server_min_years=self.senior_server_min_years,
        )


class MeetingConfig(BaseModel):
    """[meeting] section."""

    model_config = {"frozen": True}

    default_time: str = DEFAULT_MEETING_TIME
    default_due_amount: float = Field(default=DEFAULT_DUE_AMOUNT, ge=0)

    @field_validator("default_time")
    @classmethod
    def _check_time(cls, value: str) -> str:
        return validate_time(value)

