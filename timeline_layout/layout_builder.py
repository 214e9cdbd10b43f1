"""
Build the complete layout of one day.

Runs the pipeline records -> grouping -> range resolution -> lane packing
and returns a TimelineLayout that a renderer can draw directly.
"""

import logging
from collections.abc import Iterable

from .config import TimelineConfig
from .grouping import group_timeline
from .lane_packing import get_lane_count, get_max_concurrent_items, pack_items_into_lanes
from .models import ActivityRecord, RelativeAnchor
from .resolver import compute_anchor_times, resolve_display_range
from .types import TimelineLayout

logger = logging.getLogger(__name__)


def build_timeline_layout(
    records: Iterable[ActivityRecord],
    config: TimelineConfig | None = None,
    anchors: dict[RelativeAnchor, str] | None = None,
) -> TimelineLayout:
    """
    Build a collision-free lane layout for one day of activities.

    Args:
        records: All planned activities of the day
        config: Period table, anchor defaults and durations
        anchors: Anchor table to resolve relative records against. When not
            given, it is derived from the config's anchor times, overridden
            by the day's fixed-time meals.

    Returns:
        TimelineLayout with grouped display items and their lanes
    """
    config = config or TimelineConfig()
    records = list(records)

    if anchors is None:
        anchors = compute_anchor_times(records, config.anchor_times)
    else:
        anchors = dict(anchors)

    display_items = group_timeline(records)
    packing_items = [resolve_display_range(item, anchors, config) for item in display_items]
    packed_items = pack_items_into_lanes(packing_items)

    layout = TimelineLayout(
        display_items=display_items,
        packed_items=packed_items,
        lane_count=get_lane_count(packed_items),
        max_concurrent=get_max_concurrent_items(packing_items),
        anchors=anchors,
    )

    logger.debug(
        f"Laid out {len(records)} record(s) as {len(display_items)} block(s) in {layout.lane_count} lane(s)"
    )

    return layout
