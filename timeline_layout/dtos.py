"""
Pydantic DTOs for reading day files.

A day file is JSON: either a list of activity rows, or an object with a
``records`` list and an optional ``anchors`` table. Rows use the flat column
layout of the plan tables (``time_type`` plus the fields of every mode) and
are converted into the typed scheduling records the engine works with.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Literal, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from .models import (
    ActivityRecord,
    AllDay,
    FixedTime,
    ItemCategory,
    MealCategory,
    PeriodTime,
    RelativeAnchor,
    RelativeTime,
    Scheduling,
    TimePeriod,
)


def _normalize_time(v: str | None) -> str | None:
    """Accept H:MM or HH:MM[:SS] and return zero-padded HH:MM."""
    if v is None or v == "":
        return None
    if not isinstance(v, str):
        raise ValueError(f"Invalid time value: {v!r}")
    v = v.strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).strftime("%H:%M")
        except ValueError:
            continue
    raise ValueError(f"Invalid time format: {v}. Expected HH:MM")


class ActivityRow(BaseModel):
    """A single planned activity as stored in a plan table."""

    id: str = Field(description="Unique identifier of the plan row")
    category: ItemCategory = Field(description="Activity type (meal, supplement, workout, lifestyle)")
    name: str = Field(description="Food, supplement, exercise or activity name")
    time_type: Literal["fixed", "period", "relative", "all_day"] = Field(
        description="Scheduling mode"
    )
    time_start: str | None = Field(default=None, description="Start time (HH:MM) for fixed mode")
    time_end: str | None = Field(default=None, description="Optional end time (HH:MM) for fixed mode")
    time_period: TimePeriod | None = Field(default=None, description="Period for period mode")
    relative_anchor: RelativeAnchor | None = Field(
        default=None, description="Anchor event for relative mode"
    )
    relative_offset_minutes: int = Field(
        default=0, description="Signed offset from the anchor in minutes"
    )
    display_order: int = Field(default=0, description="Order within a grouped block")
    duration_minutes: int | None = Field(default=None, description="Explicit duration", gt=0)
    meal_category: MealCategory | None = Field(default=None, description="Meal category (meals only)")
    metrics: dict[str, float] = Field(
        default_factory=dict, description="Numeric metadata such as calories or protein"
    )

    @field_validator("time_start", "time_end", mode="before")
    @classmethod
    def parse_time(cls, v: str | None) -> str | None:
        """Normalize times to zero-padded HH:MM."""
        return _normalize_time(v)

    @model_validator(mode="after")
    def validate_mode_fields(self) -> Self:
        """Ensure the fields of the selected scheduling mode are present."""
        if self.time_type == "fixed" and self.time_start is None:
            raise ValueError(f"Row {self.id}: fixed scheduling requires time_start")
        if self.time_type == "period" and self.time_period is None:
            raise ValueError(f"Row {self.id}: period scheduling requires time_period")
        if self.time_type == "relative" and self.relative_anchor is None:
            raise ValueError(f"Row {self.id}: relative scheduling requires relative_anchor")
        return self

    def to_scheduling(self) -> Scheduling:
        """Build the scheduling record for the selected mode."""
        if self.time_type == "fixed":
            return FixedTime(time_start=self.time_start, time_end=self.time_end)
        if self.time_type == "period":
            return PeriodTime(period=self.time_period)
        if self.time_type == "relative":
            return RelativeTime(
                anchor=self.relative_anchor, offset_minutes=self.relative_offset_minutes
            )
        return AllDay()

    def to_record(self) -> ActivityRecord:
        """Convert to the engine's activity record."""
        return ActivityRecord(
            id=self.id,
            category=self.category,
            name=self.name,
            scheduling=self.to_scheduling(),
            display_order=self.display_order,
            duration_minutes=self.duration_minutes,
            meal_category=self.meal_category if self.category == ItemCategory.MEAL else None,
            metrics=dict(self.metrics),
        )


class DayFile(BaseModel):
    """Contents of a day file."""

    records: list[ActivityRow] = Field(default_factory=list)
    anchors: dict[RelativeAnchor, str] = Field(
        default_factory=dict, description="Anchor times overriding the defaults"
    )

    @field_validator("anchors", mode="after")
    @classmethod
    def parse_anchor_times(cls, v: dict[RelativeAnchor, str]) -> dict[RelativeAnchor, str]:
        return {anchor: _normalize_time(time_str) for anchor, time_str in v.items()}

    @model_validator(mode="before")
    @classmethod
    def accept_bare_list(cls, data: object) -> object:
        """Allow a day file that is just a list of rows."""
        if isinstance(data, list):
            return {"records": data}
        return data

    def to_records(self) -> list[ActivityRecord]:
        return [row.to_record() for row in self.records]


def load_day_file(path: Path | str) -> DayFile:
    """Read and validate a day file."""
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return DayFile.model_validate(data)


def parse_anchor_overrides(values: list[str]) -> dict[RelativeAnchor, str]:
    """Parse ``name=HH:MM`` strings into an anchor table."""
    overrides: dict[RelativeAnchor, str] = {}
    for value in values:
        name, sep, time_str = value.partition("=")
        if not sep:
            raise ValueError(f"Invalid anchor override: {value!r}. Expected name=HH:MM")
        try:
            anchor = RelativeAnchor(name.strip())
        except ValueError:
            raise ValueError(f"Unknown anchor: {name.strip()!r}")
        if not time_str.strip():
            raise ValueError(f"Missing time for anchor override: {value!r}")
        overrides[anchor] = _normalize_time(time_str)
    return overrides
