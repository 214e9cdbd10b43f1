"""
Grouping of timeline records into display blocks.

Records of the same category planned for the same time slot collapse into
one block: all breakfast foods at 08:00 become a single "Breakfast" item,
all exercises of the morning become one "Workout Session". A slot with a
single record is wrapped the same way, so every block offers the same
"add another item" affordance downstream.
"""

import logging
import math
from collections.abc import Iterable

from .models import (
    CATEGORY_ORDER,
    DEFAULT_EXERCISE_DURATION,
    ActivityRecord,
    AllDay,
    DisplayItem,
    FixedTime,
    ItemCategory,
    MealCategory,
    PeriodTime,
    RelativeTime,
    Scheduling,
)

logger = logging.getLogger(__name__)

# Numeric metadata summed when records are grouped
SUMMED_METRICS: dict[ItemCategory, tuple[str, ...]] = {
    ItemCategory.MEAL: ("calories", "protein"),
    ItemCategory.SUPPLEMENT: (),
    ItemCategory.WORKOUT: ("duration",),
    ItemCategory.LIFESTYLE: (),
}

# Default value of a metric missing on a group member
METRIC_DEFAULTS: dict[tuple[ItemCategory, str], float] = {
    (ItemCategory.WORKOUT, "duration"): DEFAULT_EXERCISE_DURATION,
}

GROUP_TITLES: dict[ItemCategory, str] = {
    ItemCategory.MEAL: "Meal",
    ItemCategory.SUPPLEMENT: "Supplements",
    ItemCategory.WORKOUT: "Workout Session",
    ItemCategory.LIFESTYLE: "Lifestyle Activities",
}

# (singular, plural) noun used in the item count subtitle
COUNT_NOUNS: dict[ItemCategory, tuple[str, str]] = {
    ItemCategory.MEAL: ("item", "items"),
    ItemCategory.SUPPLEMENT: ("supplement", "supplements"),
    ItemCategory.WORKOUT: ("exercise", "exercises"),
    ItemCategory.LIFESTYLE: ("activity", "activities"),
}


def scheduling_key(scheduling: Scheduling) -> str:
    """Describe the time slot of a scheduling record as a string."""
    if isinstance(scheduling, FixedTime):
        return f"fixed:{scheduling.time_start}"
    if isinstance(scheduling, PeriodTime):
        return f"period:{scheduling.period.value}"
    if isinstance(scheduling, RelativeTime):
        return f"relative:{scheduling.anchor.value}:{scheduling.offset_minutes}"
    if isinstance(scheduling, AllDay):
        return "all_day"
    raise TypeError(f"Unknown scheduling mode: {type(scheduling).__name__}")


def group_key(
    category: ItemCategory,
    scheduling: Scheduling,
    meal_category: MealCategory | None = None,
) -> str:
    """Build the key under which records are merged into one block.

    Meals are additionally split by meal category, so a breakfast and a
    pre-workout snack at the same time stay separate.
    """
    if category == ItemCategory.MEAL:
        meal = meal_category.value if meal_category else "unknown"
        return f"{category.value}:{meal}:{scheduling_key(scheduling)}"
    return f"{category.value}:{scheduling_key(scheduling)}"


def record_to_display_item(record: ActivityRecord) -> DisplayItem:
    """Wrap a single record as an ungrouped display item."""
    metrics = dict(record.metrics)
    if record.category == ItemCategory.WORKOUT and record.duration_minutes:
        metrics.setdefault("duration", record.duration_minutes)

    return DisplayItem(
        id=record.id,
        category=record.category,
        title=record.name,
        subtitle=record.meal_category.value if record.meal_category else "",
        scheduling=record.scheduling,
        group_key=group_key(record.category, record.scheduling, record.meal_category),
        is_grouped=False,
        item_count=1,
        item_names=[record.name],
        source_ids=[record.id],
        metrics=metrics,
        duration_minutes=record.duration_minutes,
        display_order=record.display_order,
        meal_category=record.meal_category,
    )


def format_meal_category(meal_category: MealCategory | None) -> str:
    """Format a meal category as a block title (``evening-snack`` -> ``Evening snack``)."""
    if meal_category is None:
        return GROUP_TITLES[ItemCategory.MEAL]
    name = meal_category.value
    return name[:1].upper() + name[1:].replace("-", " ", 1)


def _count_subtitle(category: ItemCategory, count: int) -> str:
    singular, plural = COUNT_NOUNS[category]
    return f"1 {singular}" if count == 1 else f"{count} {plural}"


def _sum_metrics(category: ItemCategory, members: list[DisplayItem]) -> dict[str, float]:
    totals: dict[str, float] = {}
    for name in SUMMED_METRICS[category]:
        default = METRIC_DEFAULTS.get((category, name), 0)
        # fsum is exact, so totals do not depend on member order
        totals[name] = math.fsum(member.metrics.get(name, default) for member in members)
    return totals


def _group_duration(members: list[DisplayItem]) -> int | None:
    """Total explicit duration of a block, or None if any member lacks one."""
    durations = [member.duration_minutes for member in members]
    if any(duration is None for duration in durations):
        return None
    return sum(durations)


def _merge_bucket(key: str, members: list[DisplayItem]) -> DisplayItem:
    # Stable sort: equal display orders keep their input order
    ordered = sorted(members, key=lambda member: member.display_order)
    first = ordered[0]
    category = first.category

    item_names: list[str] = []
    source_ids: list[str] = []
    for member in ordered:
        item_names.extend(member.item_names)
        source_ids.extend(member.source_ids)
    item_count = sum(member.item_count for member in ordered)

    if category == ItemCategory.MEAL:
        title = format_meal_category(first.meal_category)
    else:
        title = GROUP_TITLES[category]

    return DisplayItem(
        id=f"group:{key}",
        category=category,
        title=title,
        subtitle=_count_subtitle(category, item_count),
        scheduling=first.scheduling,
        group_key=key,
        is_grouped=True,
        item_count=item_count,
        item_names=item_names,
        source_ids=source_ids,
        metrics=_sum_metrics(category, ordered),
        duration_minutes=_group_duration(ordered),
        display_order=first.display_order,
        meal_category=first.meal_category,
    )


def group_items(items: Iterable[DisplayItem]) -> list[DisplayItem]:
    """Merge display items that share a grouping key.

    Expects items of a single category; keys carry the category, so mixed
    input still never groups across categories. Grouping already grouped
    output again returns equal blocks.

    Args:
        items: Display items, either raw records or earlier groups

    Returns:
        One grouped display item per distinct key, in first-seen key order
    """
    buckets: dict[str, list[DisplayItem]] = {}
    for item in items:
        buckets.setdefault(item.group_key, []).append(item)

    return [_merge_bucket(key, members) for key, members in buckets.items()]


def group_records(records: Iterable[ActivityRecord]) -> list[DisplayItem]:
    """Group raw records of one category into display blocks."""
    return group_items(record_to_display_item(record) for record in records)


def group_timeline(records: Iterable[ActivityRecord]) -> list[DisplayItem]:
    """Group records category by category and flatten the result.

    Categories are processed independently and appear in CATEGORY_ORDER.
    """
    by_category: dict[ItemCategory, list[ActivityRecord]] = {
        category: [] for category in CATEGORY_ORDER
    }
    for record in records:
        by_category[record.category].append(record)

    grouped: list[DisplayItem] = []
    for category in CATEGORY_ORDER:
        category_items = group_records(by_category[category])
        if category_items:
            logger.debug(
                f"Grouped {len(by_category[category])} {category.value} record(s) into {len(category_items)} block(s)"
            )
        grouped.extend(category_items)

    return grouped
