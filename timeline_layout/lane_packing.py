"""
Lane packing for the day timeline.

Greedy interval partitioning: items are assigned to the lowest lane that is
free when they start, which uses exactly as many lanes as the largest
number of items running at the same instant.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from .models import PackedItem, PackingItem


@dataclass
class _Lane:
    end_time: int


def _packing_order(item: PackingItem) -> tuple[int, int]:
    # Start time first, then longer items first
    return item.start_minutes, -item.duration_minutes


def pack_items_into_lanes(items: Iterable[PackingItem]) -> list[PackedItem]:
    """Assign each item to a lane so that items in a lane never overlap.

    Items are placed in start order, longer items first on ties, into the
    first lane whose last item has ended. A lane that ends exactly when an
    item starts is reused.

    Args:
        items: Items with resolved start/end minutes

    Returns:
        Packed items in placement order
    """
    lanes: list[_Lane] = []
    packed: list[PackedItem] = []

    for item in sorted(items, key=_packing_order):
        assigned = next(
            (index for index, lane in enumerate(lanes) if lane.end_time <= item.start_minutes),
            None,
        )
        if assigned is None:
            assigned = len(lanes)
            lanes.append(_Lane(end_time=item.end_minutes))
        else:
            lanes[assigned].end_time = item.end_minutes

        packed.append(
            PackedItem(
                id=item.id,
                start_minutes=item.start_minutes,
                end_minutes=item.end_minutes,
                category=item.category,
                lane=assigned,
            )
        )

    return packed


def get_lane_count(packed_items: list[PackedItem]) -> int:
    """Number of lanes to draw; at least one, even for an empty day."""
    if not packed_items:
        return 1
    return max(item.lane for item in packed_items) + 1


def group_by_lane(packed_items: Iterable[PackedItem]) -> dict[int, list[PackedItem]]:
    """Partition packed items by lane, keeping their order."""
    lanes: dict[int, list[PackedItem]] = {}
    for item in packed_items:
        lanes.setdefault(item.lane, []).append(item)
    return lanes


def do_times_overlap(start_a: int, end_a: int, start_b: int, end_b: int) -> bool:
    """Check if two [start, end) ranges overlap. Touching ranges do not."""
    return start_a < end_b and start_b < end_a


def get_max_concurrent_items(items: Iterable[PackingItem]) -> int:
    """Get the largest number of items running at the same instant."""
    # (time, 0) for ends sorts before (time, 1) for starts
    events: list[tuple[int, int]] = []
    for item in items:
        events.append((item.start_minutes, 1))
        events.append((item.end_minutes, 0))
    events.sort()

    current = 0
    maximum = 0
    for _, is_start in events:
        if is_start:
            current += 1
            maximum = max(maximum, current)
        else:
            current -= 1

    return maximum
