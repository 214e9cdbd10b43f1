"""
Layout printing and formatting utilities.

This module formats a TimelineLayout as plain text, one line per lane, for
inspecting layouts from the command line.
"""

from .lane_packing import group_by_lane
from .models import RelativeAnchor
from .time_utils import MINUTES_PER_DAY, minutes_to_time
from .types import ResolvedTime, TimelineLayout


def format_minutes(total_minutes: int) -> str:
    """Format minutes as HH:MM, marking times on the following day with +1."""
    days, minutes = divmod(total_minutes, MINUTES_PER_DAY)
    suffix = f"+{days}" if days else ""
    return f"{minutes_to_time(minutes)}{suffix}"


def format_layout_for_printing(layout: TimelineLayout) -> str:
    """Format a layout as text, lane by lane."""
    if not layout.packed_items:
        return "No items scheduled"

    lines: list[str] = []
    lines.append(f"Blocks: {len(layout.display_items)}")
    lines.append(f"Lanes: {layout.lane_count} (max concurrent: {layout.max_concurrent})")
    lines.append("-" * 80)

    lanes = group_by_lane(layout.packed_items)
    for lane in sorted(lanes):
        lines.append(f"Lane {lane}:")
        for packed in sorted(lanes[lane], key=lambda item: item.start_minutes):
            item = layout.display_item(packed.id)
            span = f"{format_minutes(packed.start_minutes)}-{format_minutes(packed.end_minutes)}"
            names = ", ".join(item.item_names)
            lines.append(f"  {span}  [{item.category.value}] {item.title} ({item.subtitle}): {names}")

    return "\n".join(lines)


def format_anchors(anchors: dict[RelativeAnchor, str]) -> str:
    """Format an anchor table, one anchor per line in time order."""
    ordered = sorted(anchors.items(), key=lambda entry: entry[1])
    return "\n".join(f"{anchor.value:<14} {time_str}" for anchor, time_str in ordered)


def format_resolved(record_id: str, name: str, resolved: ResolvedTime) -> str:
    end = format_minutes(resolved.end_minutes) if resolved.end_minutes is not None else "-"
    return f"{record_id:<12} {format_minutes(resolved.start_minutes)}  {end:<8} {name}"


def print_layout(layout: TimelineLayout, title: str = "Timeline") -> None:
    """Print a formatted layout with a title."""
    print(f"\n📅 {title}")
    print(format_layout_for_printing(layout))
