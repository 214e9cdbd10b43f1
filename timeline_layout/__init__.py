from .config import TimelineConfig
from .errors import (
    InvalidTimeError,
    TimelineContractError,
    UnknownAnchorError,
    UnknownPeriodError,
)
from .grouping import group_items, group_key, group_records, group_timeline
from .lane_packing import (
    do_times_overlap,
    get_lane_count,
    get_max_concurrent_items,
    group_by_lane,
    pack_items_into_lanes,
)
from .layout_builder import build_timeline_layout
from .models import (
    ActivityRecord,
    AllDay,
    DisplayItem,
    FixedTime,
    ItemCategory,
    MealCategory,
    PackedItem,
    PackingItem,
    PeriodTime,
    RelativeAnchor,
    RelativeTime,
    TimePeriod,
)
from .resolver import compute_anchor_times, resolve, resolve_display_range
from .time_utils import minutes_to_time, period_range, time_to_minutes
from .types import ResolvedTime, TimelineLayout

__all__ = [
    "ActivityRecord",
    "AllDay",
    "DisplayItem",
    "FixedTime",
    "InvalidTimeError",
    "ItemCategory",
    "MealCategory",
    "PackedItem",
    "PackingItem",
    "PeriodTime",
    "RelativeAnchor",
    "RelativeTime",
    "ResolvedTime",
    "TimePeriod",
    "TimelineConfig",
    "TimelineContractError",
    "TimelineLayout",
    "UnknownAnchorError",
    "UnknownPeriodError",
    "build_timeline_layout",
    "compute_anchor_times",
    "do_times_overlap",
    "get_lane_count",
    "get_max_concurrent_items",
    "group_by_lane",
    "group_items",
    "group_key",
    "group_records",
    "group_timeline",
    "minutes_to_time",
    "pack_items_into_lanes",
    "period_range",
    "resolve",
    "resolve_display_range",
    "time_to_minutes",
]
