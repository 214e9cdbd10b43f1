"""
Result types for the timeline layout engine.

This module contains the value objects returned by the resolver and the
layout builder.
"""

from dataclasses import dataclass

from .models import DisplayItem, PackedItem, RelativeAnchor


@dataclass(frozen=True)
class ResolvedTime:
    """Effective clock time of one scheduling record, in minutes since midnight."""

    sort_minutes: int
    start_minutes: int
    end_minutes: int | None = None


@dataclass(frozen=True)
class TimelineLayout:
    """Complete layout of one day, ready for a renderer."""

    display_items: list[DisplayItem]
    packed_items: list[PackedItem]
    lane_count: int
    max_concurrent: int
    anchors: dict[RelativeAnchor, str]

    def display_item(self, item_id: str) -> DisplayItem:
        """Look up the display item a packed item was built from."""
        for item in self.display_items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)
