import pytest

from timeline_layout.errors import InvalidTimeError, UnknownPeriodError
from timeline_layout.models import (
    AllDay,
    FixedTime,
    PeriodTime,
    RelativeAnchor,
    RelativeTime,
    TimePeriod,
)
from timeline_layout.time_utils import (
    clamp_to_day,
    format_period_display,
    format_relative_time_display,
    format_time_display,
    minutes_to_time,
    period_for_minutes,
    period_range,
    scheduling_display_text,
    time_to_minutes,
)


@pytest.mark.parametrize(
    "time_str, minutes",
    [("00:00", 0), ("05:00", 300), ("08:30", 510), ("12:00", 720), ("23:59", 1439)],
)
def test_time_to_minutes(time_str: str, minutes: int) -> None:
    assert time_to_minutes(time_str) == minutes


@pytest.mark.parametrize("bad", ["08:00:59", " 08:00", "08:00 ", "08:00\n"])
def test_time_to_minutes_rejects_seconds_and_padding(bad: str) -> None:
    with pytest.raises(InvalidTimeError):
        time_to_minutes(bad)


def test_time_round_trip_for_every_minute_of_the_day() -> None:
    for hours in range(24):
        for minutes in range(60):
            time_str = f"{hours:02d}:{minutes:02d}"
            assert minutes_to_time(time_to_minutes(time_str)) == time_str


@pytest.mark.parametrize("bad", ["8:00", "24:00", "12:60", "noon", "", "12-30", "1230"])
def test_malformed_time_fails_fast(bad: str) -> None:
    with pytest.raises(InvalidTimeError):
        time_to_minutes(bad)


@pytest.mark.parametrize("minutes", [-1, 1440, 5000])
def test_minutes_to_time_rejects_out_of_day_values(minutes: int) -> None:
    with pytest.raises(InvalidTimeError):
        minutes_to_time(minutes)


def test_clamp_to_day() -> None:
    assert clamp_to_day(-30) == 0
    assert clamp_to_day(600) == 600
    assert clamp_to_day(1500) == 1439


def test_period_range_default_table() -> None:
    assert period_range(TimePeriod.morning) == (420, 600)
    assert period_range(TimePeriod.before_sleep) == (1320, 1439)


def test_period_range_from_custom_table(four_period_config) -> None:
    ranges = four_period_config.period_ranges
    assert period_range(TimePeriod.morning, ranges) == (300, 720)


def test_period_crossing_midnight_ends_next_day(four_period_config) -> None:
    start, end = period_range(TimePeriod.night, four_period_config.period_ranges)
    assert (start, end) == (1260, 1740)
    assert end > start


def test_unknown_period_fails_fast(four_period_config) -> None:
    with pytest.raises(UnknownPeriodError):
        period_range(TimePeriod.early_morning, four_period_config.period_ranges)


def test_period_for_minutes() -> None:
    assert period_for_minutes(time_to_minutes("06:00")) == TimePeriod.early_morning
    assert period_for_minutes(time_to_minutes("10:00")) == TimePeriod.midday
    assert period_for_minutes(time_to_minutes("02:00")) == TimePeriod.before_sleep
    assert period_for_minutes(1439) == TimePeriod.before_sleep


def test_period_for_minutes_after_midnight_in_wrapping_period(four_period_config) -> None:
    ranges = four_period_config.period_ranges
    assert period_for_minutes(time_to_minutes("02:00"), ranges) == TimePeriod.night
    assert period_for_minutes(time_to_minutes("22:30"), ranges) == TimePeriod.night
    assert period_for_minutes(time_to_minutes("05:00"), ranges) == TimePeriod.morning


@pytest.mark.parametrize(
    "time_str, expected",
    [("00:05", "12:05 AM"), ("08:00", "8:00 AM"), ("12:30", "12:30 PM"), ("19:45", "7:45 PM")],
)
def test_format_time_display(time_str: str, expected: str) -> None:
    assert format_time_display(time_str) == expected


@pytest.mark.parametrize(
    "anchor, offset, expected",
    [
        (RelativeAnchor.breakfast, 30, "30 min after breakfast"),
        (RelativeAnchor.lunch, -15, "15 min before lunch"),
        (RelativeAnchor.dinner, 120, "2 hr after dinner"),
        (RelativeAnchor.sleep, -75, "1 hr 15 min before bed"),
        (RelativeAnchor.wake_up, 0, "At wake up"),
        (RelativeAnchor.pre_workout, 0, "Before workout"),
        (RelativeAnchor.post_workout, 0, "After workout"),
    ],
)
def test_format_relative_time_display(anchor: RelativeAnchor, offset: int, expected: str) -> None:
    assert format_relative_time_display(anchor, offset) == expected


def test_scheduling_display_text() -> None:
    assert scheduling_display_text(FixedTime("08:00")) == "8:00 AM"
    assert scheduling_display_text(FixedTime("08:00", "09:30")) == "8:00 AM - 9:30 AM"
    assert scheduling_display_text(PeriodTime(TimePeriod.early_morning)) == "Early Morning"
    assert scheduling_display_text(RelativeTime(RelativeAnchor.lunch, 60)) == "1 hr after lunch"
    assert scheduling_display_text(AllDay()) == "All Day"
    assert format_period_display(TimePeriod.before_sleep) == "Before Sleep"
