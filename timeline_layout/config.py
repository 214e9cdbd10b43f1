"""Configuration for the timeline layout engine."""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .models import (
    ALL_DAY_WINDOW,
    DEFAULT_ANCHOR_TIMES,
    DEFAULT_ITEM_DURATION,
    DEFAULT_WORKOUT_GROUP_DURATION,
    TIME_PERIOD_RANGES,
    RelativeAnchor,
    TimePeriod,
)

# Load .env file if present
load_dotenv()


@dataclass(frozen=True)
class TimelineConfig:
    """Tables and durations the engine treats as data."""

    period_ranges: dict[TimePeriod, tuple[str, str]] = field(
        default_factory=lambda: dict(TIME_PERIOD_RANGES)
    )
    anchor_times: dict[RelativeAnchor, str] = field(
        default_factory=lambda: dict(DEFAULT_ANCHOR_TIMES)
    )
    all_day_window: tuple[str, str] = ALL_DAY_WINDOW
    default_duration_minutes: int = DEFAULT_ITEM_DURATION
    workout_group_duration_minutes: int = DEFAULT_WORKOUT_GROUP_DURATION

    @classmethod
    def from_env(cls) -> "TimelineConfig":
        """Load configuration from environment variables."""
        return cls(
            all_day_window=(
                os.getenv("TIMELINE_DAY_START", ALL_DAY_WINDOW[0]),
                os.getenv("TIMELINE_DAY_END", ALL_DAY_WINDOW[1]),
            ),
            default_duration_minutes=int(
                os.getenv("TIMELINE_DEFAULT_DURATION", str(DEFAULT_ITEM_DURATION))
            ),
            workout_group_duration_minutes=int(
                os.getenv("TIMELINE_WORKOUT_GROUP_DURATION", str(DEFAULT_WORKOUT_GROUP_DURATION))
            ),
        )

    def with_anchors(self, overrides: dict[RelativeAnchor, str]) -> "TimelineConfig":
        """Return a copy whose anchor table has the given anchors replaced."""
        anchors = dict(self.anchor_times)
        anchors.update(overrides)
        return TimelineConfig(
            period_ranges=dict(self.period_ranges),
            anchor_times=anchors,
            all_day_window=self.all_day_window,
            default_duration_minutes=self.default_duration_minutes,
            workout_group_duration_minutes=self.workout_group_duration_minutes,
        )
