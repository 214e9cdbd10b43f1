"""
Time arithmetic for the day timeline.

All times are handled as integer minutes since midnight. Conversion helpers
expect zero-padded 24-hour ``HH:MM`` strings and raise ``InvalidTimeError``
for anything else rather than guessing.
"""

import re

from .errors import InvalidTimeError, UnknownPeriodError
from .models import (
    TIME_PERIOD_RANGES,
    AllDay,
    FixedTime,
    PeriodTime,
    RelativeAnchor,
    RelativeTime,
    Scheduling,
    TimePeriod,
)

MINUTES_PER_DAY = 24 * 60

_TIME_PATTERN = re.compile(r"([0-9]{2}):([0-9]{2})")


def time_to_minutes(time_str: str) -> int:
    """Convert an ``HH:MM`` string to minutes since midnight."""
    match = _TIME_PATTERN.fullmatch(time_str) if isinstance(time_str, str) else None
    if match is None:
        raise InvalidTimeError(f"Invalid time format: {time_str!r}. Expected HH:MM")

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidTimeError(f"Time out of range: {time_str!r}")
    return hours * 60 + minutes


def minutes_to_time(total_minutes: int) -> str:
    """Convert minutes since midnight to a zero-padded ``HH:MM`` string."""
    if not 0 <= total_minutes < MINUTES_PER_DAY:
        raise InvalidTimeError(
            f"Minute value {total_minutes} is outside the day [0, {MINUTES_PER_DAY})"
        )
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours:02d}:{minutes:02d}"


def clamp_to_day(total_minutes: int) -> int:
    """Clamp a minute value to the first/last minute of the day."""
    return max(0, min(total_minutes, MINUTES_PER_DAY - 1))


def period_range(
    period: TimePeriod,
    ranges: dict[TimePeriod, tuple[str, str]] = TIME_PERIOD_RANGES,
) -> tuple[int, int]:
    """Get the ``[start, end)`` minutes of a period.

    A range whose end is not after its start runs past midnight. Its end is
    reported on the following day (``end + 1440``) so that the result never
    wraps.
    """
    if period not in ranges:
        raise UnknownPeriodError(f"No time range configured for period: {period}")

    start_str, end_str = ranges[period]
    start = time_to_minutes(start_str)
    end = time_to_minutes(end_str)
    if end <= start:
        end += MINUTES_PER_DAY
    return start, end


def is_minute_in_period(
    total_minutes: int,
    period: TimePeriod,
    ranges: dict[TimePeriod, tuple[str, str]] = TIME_PERIOD_RANGES,
) -> bool:
    start, end = period_range(period, ranges)
    # Check the following day too, for periods that cross midnight
    return start <= total_minutes < end or start <= total_minutes + MINUTES_PER_DAY < end


def period_for_minutes(
    total_minutes: int,
    ranges: dict[TimePeriod, tuple[str, str]] = TIME_PERIOD_RANGES,
) -> TimePeriod:
    """Determine which period a time falls into.

    Times not covered by any period (after midnight, or the last minute of
    the day) belong to ``before_sleep``.
    """
    for period in ranges:
        if is_minute_in_period(total_minutes, period, ranges):
            return period
    return TimePeriod.before_sleep


# Display helpers

_ANCHOR_LABELS: dict[RelativeAnchor, str] = {
    RelativeAnchor.wake_up: "wake up",
    RelativeAnchor.pre_workout: "workout",
    RelativeAnchor.post_workout: "workout",
    RelativeAnchor.breakfast: "breakfast",
    RelativeAnchor.lunch: "lunch",
    RelativeAnchor.evening_snack: "evening snack",
    RelativeAnchor.dinner: "dinner",
    RelativeAnchor.sleep: "bed",
}


def format_time_display(time_str: str) -> str:
    """Format an ``HH:MM`` time for display (e.g. ``"8:00 AM"``)."""
    hours, minutes = divmod(time_to_minutes(time_str), 60)
    suffix = "PM" if hours >= 12 else "AM"
    display_hours = hours % 12 or 12
    return f"{display_hours}:{minutes:02d} {suffix}"


def format_relative_time_display(anchor: RelativeAnchor, offset_minutes: int) -> str:
    """Format a relative time, e.g. ``"30 min after breakfast"``."""
    label = _ANCHOR_LABELS[anchor]

    if offset_minutes == 0:
        if anchor == RelativeAnchor.pre_workout:
            return "Before workout"
        if anchor == RelativeAnchor.post_workout:
            return "After workout"
        return f"At {label}"

    direction = "after" if offset_minutes > 0 else "before"
    hours, mins = divmod(abs(offset_minutes), 60)

    if hours == 0:
        return f"{mins} min {direction} {label}"
    if mins == 0:
        return f"{hours} hr {direction} {label}"
    return f"{hours} hr {mins} min {direction} {label}"


def format_period_display(period: TimePeriod) -> str:
    """Format a period name for display (``early_morning`` -> ``Early Morning``)."""
    return period.value.replace("_", " ").title()


def scheduling_display_text(scheduling: Scheduling) -> str:
    """Get the human readable time description of a scheduling record."""
    if isinstance(scheduling, FixedTime):
        text = format_time_display(scheduling.time_start)
        if scheduling.time_end:
            text = f"{text} - {format_time_display(scheduling.time_end)}"
        return text
    if isinstance(scheduling, RelativeTime):
        return format_relative_time_display(scheduling.anchor, scheduling.offset_minutes)
    if isinstance(scheduling, PeriodTime):
        return format_period_display(scheduling.period)
    if isinstance(scheduling, AllDay):
        return "All Day"
    raise TypeError(f"Unknown scheduling mode: {type(scheduling).__name__}")
