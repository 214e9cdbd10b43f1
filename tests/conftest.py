import pytest

from timeline_layout.config import TimelineConfig
from timeline_layout.models import (
    ActivityRecord,
    FixedTime,
    ItemCategory,
    PackingItem,
    TimePeriod,
)


@pytest.fixture
def config() -> TimelineConfig:
    return TimelineConfig()


@pytest.fixture
def four_period_config() -> TimelineConfig:
    """Config with a coarse four-period day, night running past midnight."""
    return TimelineConfig(
        period_ranges={
            TimePeriod.morning: ("05:00", "12:00"),
            TimePeriod.midday: ("12:00", "17:00"),
            TimePeriod.evening: ("17:00", "21:00"),
            TimePeriod.night: ("21:00", "05:00"),
        }
    )


@pytest.fixture
def make_record():
    counter = iter(range(1, 10_000))

    def _make(
        category: ItemCategory = ItemCategory.MEAL,
        scheduling=None,
        name: str | None = None,
        **kwargs,
    ) -> ActivityRecord:
        n = next(counter)
        return ActivityRecord(
            id=kwargs.pop("id", f"r{n}"),
            category=category,
            name=name or f"{category.value} {n}",
            scheduling=scheduling or FixedTime("08:00"),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_item():
    counter = iter(range(1, 10_000))

    def _make(start: int, end: int, category: ItemCategory = ItemCategory.MEAL) -> PackingItem:
        return PackingItem(
            id=f"i{next(counter)}",
            start_minutes=start,
            end_minutes=end,
            category=category,
        )

    return _make
