"""Tests for the RecurrenceConfig model and its edit transforms."""

from datetime import UTC, datetime

import pytest

from py_icsrule.rrule import EndType, Frequency, RecurrenceConfig


def test_default_is_no_recurrence():
    config = RecurrenceConfig.none()

    assert config.frequency is None
    assert config.interval == 1
    assert config.end_type == EndType.NEVER
    assert not config.is_recurring


def test_config_is_immutable():
    config = RecurrenceConfig(frequency=Frequency.DAILY)
    with pytest.raises(AttributeError):
        config.interval = 2


def test_string_values_are_coerced():
    config = RecurrenceConfig(frequency="WEEKLY", end_type="COUNT", count=3, by_day=["MO"])

    assert config.frequency == Frequency.WEEKLY
    assert config.end_type == EndType.COUNT
    assert config.by_day == ("MO",)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"interval": 0},
        {"end_type": EndType.COUNT},
        {"end_type": EndType.COUNT, "count": 0},
        {"end_type": EndType.UNTIL},
        {"end_type": EndType.NEVER, "count": 3},
        {"end_type": EndType.COUNT, "count": 3, "until": datetime(2030, 1, 1, tzinfo=UTC)},
        {"by_day": ("XX",)},
        {"by_month_day": 0},
        {"by_month": (13,)},
        {"frequency": "HOURLY"},
    ],
)
def test_invalid_configs_raise(kwargs):
    with pytest.raises(ValueError):
        RecurrenceConfig(**kwargs)


def test_with_frequency_clears_by_fields():
    config = RecurrenceConfig(frequency=Frequency.WEEKLY, interval=2, by_day=("MO", "FR"))

    changed = config.with_frequency(Frequency.MONTHLY)

    assert changed.frequency == Frequency.MONTHLY
    assert changed.interval == 2
    assert changed.by_day == ()
    assert config.by_day == ("MO", "FR"), "Original must not change"


def test_with_frequency_none_turns_off_recurrence():
    config = RecurrenceConfig(frequency=Frequency.DAILY).with_frequency(None)
    assert not config.is_recurring


def test_end_transforms_keep_count_and_until_exclusive():
    """Test that setting one end condition clears the other."""
    until = datetime(2030, 1, 1, tzinfo=UTC)
    config = RecurrenceConfig(frequency=Frequency.DAILY)

    by_count = config.ending_after(5)
    assert (by_count.end_type, by_count.count, by_count.until) == (EndType.COUNT, 5, None)

    by_date = by_count.ending_on(until)
    assert (by_date.end_type, by_date.count, by_date.until) == (EndType.UNTIL, None, until)

    back = by_date.ending_after(2)
    assert back.until is None

    never = back.ending_never()
    assert (never.end_type, never.count, never.until) == (EndType.NEVER, None, None)


def test_toggle_day():
    config = RecurrenceConfig(frequency=Frequency.WEEKLY)

    config = config.toggle_day("MO").toggle_day("FR").toggle_day("WE")
    assert config.by_day == ("MO", "FR", "WE")

    config = config.toggle_day("FR")
    assert config.by_day == ("MO", "WE")


def test_toggle_month_and_month_day():
    config = RecurrenceConfig(frequency=Frequency.YEARLY).toggle_month(6).toggle_month(1)
    assert config.by_month == (6, 1)
    assert config.toggle_month(6).by_month == (1,)

    monthly = RecurrenceConfig(frequency=Frequency.MONTHLY).with_month_day(15)
    assert monthly.by_month_day == 15
    assert monthly.with_month_day(None).by_month_day is None


def test_with_interval_validates():
    config = RecurrenceConfig(frequency=Frequency.DAILY)
    assert config.with_interval(3).interval == 3
    with pytest.raises(ValueError):
        config.with_interval(0)
