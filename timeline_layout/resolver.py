"""
Scheduling resolution.

Turns a scheduling record into concrete minutes of the day. Anchor times and
period tables are always passed in explicitly; nothing here reads a global
default on its own.
"""

import logging
from collections.abc import Iterable

from .config import TimelineConfig
from .errors import UnknownAnchorError
from .models import (
    MEAL_CATEGORY_TO_ANCHOR,
    ActivityRecord,
    AllDay,
    DisplayItem,
    FixedTime,
    ItemCategory,
    PackingItem,
    PeriodTime,
    RelativeAnchor,
    RelativeTime,
    Scheduling,
    TimePeriod,
)
from .time_utils import (
    MINUTES_PER_DAY,
    clamp_to_day,
    period_for_minutes,
    period_range,
    time_to_minutes,
)
from .types import ResolvedTime

logger = logging.getLogger(__name__)


def calculate_relative_minutes(
    anchor: RelativeAnchor,
    offset_minutes: int,
    anchors: dict[RelativeAnchor, str],
) -> int:
    """Resolve an offset from an anchor to minutes since midnight.

    Results outside the day are clamped to 00:00 / 23:59, so an item pushed
    past midnight stays on the day it was planned for.
    """
    if anchor not in anchors:
        raise UnknownAnchorError(f"No time known for anchor: {anchor}")

    minutes = time_to_minutes(anchors[anchor]) + offset_minutes
    clamped = clamp_to_day(minutes)
    if clamped != minutes:
        logger.debug(
            f"Relative time {anchor.value}{offset_minutes:+d} resolved to {minutes}, clamped to {clamped}"
        )
    return clamped


def resolve(
    scheduling: Scheduling,
    anchors: dict[RelativeAnchor, str],
    config: TimelineConfig | None = None,
) -> ResolvedTime:
    """Compute the effective sort/start time and, where known, the end time.

    Args:
        scheduling: The scheduling record to resolve
        anchors: Anchor table for relative records
        config: Supplies the period table and all-day window

    Returns:
        ResolvedTime; ``end_minutes`` is None for fixed records without an
        end and for relative records
    """
    config = config or TimelineConfig()

    if isinstance(scheduling, FixedTime):
        start = time_to_minutes(scheduling.time_start)
        end = time_to_minutes(scheduling.time_end) if scheduling.time_end else None
        return ResolvedTime(sort_minutes=start, start_minutes=start, end_minutes=end)

    if isinstance(scheduling, PeriodTime):
        # The item occupies the whole period, not a single instant
        start, end = period_range(scheduling.period, config.period_ranges)
        return ResolvedTime(sort_minutes=start, start_minutes=start, end_minutes=end)

    if isinstance(scheduling, RelativeTime):
        start = calculate_relative_minutes(
            scheduling.anchor, scheduling.offset_minutes, anchors
        )
        return ResolvedTime(sort_minutes=start, start_minutes=start)

    if isinstance(scheduling, AllDay):
        day_start, day_end = config.all_day_window
        start = time_to_minutes(day_start)
        return ResolvedTime(
            sort_minutes=start, start_minutes=start, end_minutes=time_to_minutes(day_end)
        )

    raise TypeError(f"Unknown scheduling mode: {type(scheduling).__name__}")


def default_duration_for(item: DisplayItem, config: TimelineConfig) -> int:
    """Get the span used when an item has no explicit end."""
    if item.is_grouped and item.category == ItemCategory.WORKOUT:
        return config.workout_group_duration_minutes
    return config.default_duration_minutes


def resolve_display_range(
    item: DisplayItem,
    anchors: dict[RelativeAnchor, str],
    config: TimelineConfig | None = None,
) -> PackingItem:
    """Resolve a display item to the concrete range used for lane packing.

    An explicit end wins, then an explicit duration, then the default span
    for the item. An end that is not after the start is replaced by the
    default span.
    """
    config = config or TimelineConfig()
    resolved = resolve(item.scheduling, anchors, config)
    start = resolved.start_minutes

    if resolved.end_minutes is not None:
        end = resolved.end_minutes
    elif item.duration_minutes:
        end = start + item.duration_minutes
    else:
        end = start + default_duration_for(item, config)

    if end <= start:
        end = start + config.default_duration_minutes

    return PackingItem(
        id=item.id,
        start_minutes=start,
        end_minutes=end,
        category=item.category,
    )


def compute_anchor_times(
    records: Iterable[ActivityRecord],
    base: dict[RelativeAnchor, str],
) -> dict[RelativeAnchor, str]:
    """Derive the client's anchor table from fixed-time meals.

    Supplements or workouts planned relative to a meal then follow the time
    the meal is actually planned for. Returns a new table; ``base`` is not
    modified.
    """
    anchors = dict(base)

    for record in records:
        if record.category != ItemCategory.MEAL or record.meal_category is None:
            continue
        if not isinstance(record.scheduling, FixedTime):
            continue
        anchor = MEAL_CATEGORY_TO_ANCHOR.get(record.meal_category)
        if anchor is not None:
            anchors[anchor] = record.scheduling.time_start

    return anchors


def effective_sort_minutes(
    scheduling: Scheduling,
    anchors: dict[RelativeAnchor, str],
    config: TimelineConfig | None = None,
) -> int:
    """Get the minute value used to order items in list views.

    All-day items sort after everything else.
    """
    if isinstance(scheduling, AllDay):
        return MINUTES_PER_DAY
    return resolve(scheduling, anchors, config).sort_minutes


def sort_display_items(
    items: list[DisplayItem],
    anchors: dict[RelativeAnchor, str],
    config: TimelineConfig | None = None,
) -> list[DisplayItem]:
    """Sort items by their effective time (stable)."""
    return sorted(items, key=lambda item: effective_sort_minutes(item.scheduling, anchors, config))


def item_time_period(
    scheduling: Scheduling,
    anchors: dict[RelativeAnchor, str],
    config: TimelineConfig | None = None,
) -> TimePeriod | None:
    """Get the period an item belongs to, or None for all-day items."""
    config = config or TimelineConfig()
    if isinstance(scheduling, AllDay):
        return None
    if isinstance(scheduling, PeriodTime):
        return scheduling.period
    minutes = resolve(scheduling, anchors, config).sort_minutes
    return period_for_minutes(minutes, config.period_ranges)


def group_by_period(
    items: list[DisplayItem],
    anchors: dict[RelativeAnchor, str],
    config: TimelineConfig | None = None,
) -> dict[TimePeriod | None, list[DisplayItem]]:
    """Bucket items by period for list views.

    Every configured period gets a bucket, plus ``None`` for all-day items.
    Items within a period are sorted by time; all-day items keep input order.
    """
    config = config or TimelineConfig()
    groups: dict[TimePeriod | None, list[DisplayItem]] = {
        period: [] for period in config.period_ranges
    }
    groups[None] = []

    for item in items:
        period = item_time_period(item.scheduling, anchors, config)
        groups.setdefault(period, []).append(item)

    for period, period_items in groups.items():
        if period is not None:
            groups[period] = sort_display_items(period_items, anchors, config)

    return groups
