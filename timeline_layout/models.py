from dataclasses import dataclass, field
from enum import Enum


class ItemCategory(Enum):
    """Kinds of activity shown on the day timeline"""

    MEAL = "meal"
    SUPPLEMENT = "supplement"
    WORKOUT = "workout"
    LIFESTYLE = "lifestyle"


class TimePeriod(Enum):
    early_morning = "early_morning"
    morning = "morning"
    midday = "midday"
    afternoon = "afternoon"
    evening = "evening"
    night = "night"
    before_sleep = "before_sleep"


class RelativeAnchor(Enum):
    wake_up = "wake_up"
    pre_workout = "pre_workout"
    post_workout = "post_workout"
    breakfast = "breakfast"
    lunch = "lunch"
    evening_snack = "evening_snack"
    dinner = "dinner"
    sleep = "sleep"


class MealCategory(Enum):
    pre_workout = "pre-workout"
    post_workout = "post-workout"
    breakfast = "breakfast"
    lunch = "lunch"
    evening_snack = "evening-snack"
    dinner = "dinner"


# Default [start, end) range for each period, as HH:MM strings.
# Overridable through TimelineConfig.period_ranges.
TIME_PERIOD_RANGES: dict[TimePeriod, tuple[str, str]] = {
    TimePeriod.early_morning: ("05:00", "07:00"),
    TimePeriod.morning: ("07:00", "10:00"),
    TimePeriod.midday: ("10:00", "14:00"),
    TimePeriod.afternoon: ("14:00", "17:00"),
    TimePeriod.evening: ("17:00", "20:00"),
    TimePeriod.night: ("20:00", "22:00"),
    TimePeriod.before_sleep: ("22:00", "23:59"),
}

# Anchor times used when the client has no known time for an anchor
DEFAULT_ANCHOR_TIMES: dict[RelativeAnchor, str] = {
    RelativeAnchor.wake_up: "06:30",
    RelativeAnchor.breakfast: "08:00",
    RelativeAnchor.lunch: "12:30",
    RelativeAnchor.evening_snack: "16:00",
    RelativeAnchor.dinner: "19:00",
    RelativeAnchor.sleep: "22:30",
    RelativeAnchor.pre_workout: "17:00",
    RelativeAnchor.post_workout: "18:30",
}

# All-day items span the visible part of the timeline
ALL_DAY_WINDOW: tuple[str, str] = ("05:00", "23:00")

# Durations applied when an item has no explicit end
DEFAULT_ITEM_DURATION = 30
DEFAULT_WORKOUT_GROUP_DURATION = 45  # a bundled workout block is longer than one exercise

# Exercises without a duration still count toward a session total
DEFAULT_EXERCISE_DURATION = 5

# Fixed-time meals of these categories define the client's actual anchor times
MEAL_CATEGORY_TO_ANCHOR: dict[MealCategory, RelativeAnchor] = {
    MealCategory.breakfast: RelativeAnchor.breakfast,
    MealCategory.lunch: RelativeAnchor.lunch,
    MealCategory.evening_snack: RelativeAnchor.evening_snack,
    MealCategory.dinner: RelativeAnchor.dinner,
    MealCategory.pre_workout: RelativeAnchor.pre_workout,
    MealCategory.post_workout: RelativeAnchor.post_workout,
}

# Order in which per-category groups are flattened onto the timeline
CATEGORY_ORDER: list[ItemCategory] = [
    ItemCategory.MEAL,
    ItemCategory.SUPPLEMENT,
    ItemCategory.WORKOUT,
    ItemCategory.LIFESTYLE,
]


# Scheduling modes. Each mode carries only the fields it needs.

@dataclass(frozen=True)
class FixedTime:
    time_start: str  # HH:MM
    time_end: str | None = None


@dataclass(frozen=True)
class PeriodTime:
    period: TimePeriod


@dataclass(frozen=True)
class RelativeTime:
    anchor: RelativeAnchor
    offset_minutes: int = 0  # negative = before the anchor


@dataclass(frozen=True)
class AllDay:
    pass


Scheduling = FixedTime | PeriodTime | RelativeTime | AllDay


@dataclass(frozen=True)
class ActivityRecord:
    """One planned activity as supplied by the data layer."""

    id: str
    category: ItemCategory
    name: str
    scheduling: Scheduling
    display_order: int = 0
    duration_minutes: int | None = None
    meal_category: MealCategory | None = None
    metrics: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class DisplayItem:
    """A grouped timeline block handed to the lane packer.

    Single records are wrapped the same way as multi-record clusters, so
    ``is_grouped`` is always true for output of the grouping engine.
    """

    id: str
    category: ItemCategory
    title: str
    subtitle: str
    scheduling: Scheduling
    group_key: str
    is_grouped: bool
    item_count: int
    item_names: list[str]
    source_ids: list[str]
    metrics: dict[str, float]
    duration_minutes: int | None = None
    display_order: int = 0
    meal_category: MealCategory | None = None


@dataclass(frozen=True)
class PackingItem:
    id: str
    start_minutes: int
    end_minutes: int
    category: ItemCategory

    @property
    def duration_minutes(self) -> int:
        return self.end_minutes - self.start_minutes


@dataclass(frozen=True)
class PackedItem(PackingItem):
    lane: int = 0
