"""Tests for representability analysis."""

import pytest

from py_icsrule.rrule import (
    PRESETS,
    Representability,
    classify,
    is_fully_representable,
    unsupported_keys,
)


@pytest.mark.parametrize(
    "text",
    [
        "FREQ=WEEKLY;BYDAY=MO,WE",
        "FREQ=DAILY;INTERVAL=3;COUNT=4",
        "FREQ=MONTHLY;BYMONTHDAY=31;UNTIL=20300101T000000Z",
        "FREQ=YEARLY;BYMONTH=1,7",
    ],
)
def test_modeled_rules_are_fully_representable(text):
    assert classify(text) == Representability.FULLY_REPRESENTABLE


@pytest.mark.parametrize(
    "text",
    [
        "FREQ=WEEKLY;BYSETPOS=-1",
        "FREQ=YEARLY;BYYEARDAY=100",
        "FREQ=YEARLY;BYWEEKNO=20",
        "FREQ=WEEKLY;WKST=SU;BYDAY=MO",
        "FREQ=DAILY;BYHOUR=9,17",
    ],
)
def test_unmodeled_keys_are_flagged(text):
    assert classify(text) == Representability.HAS_UNSUPPORTED_EXTENSIONS
    assert not is_fully_representable(text)


def test_empty_rule_is_representable():
    assert classify("") == Representability.FULLY_REPRESENTABLE
    assert classify(None) == Representability.FULLY_REPRESENTABLE


@pytest.mark.parametrize(
    "text",
    [
        "FREQ=DAILY;UNTIL=0001-01-01T00:00:00+05:00",
        "FREQ=DAILY;UNTIL=9999-12-31T23:00:00-05:00",
    ],
)
def test_unconvertible_until_still_classifies(text):
    assert classify(text) == Representability.FULLY_REPRESENTABLE


def test_non_editable_frequency_is_still_representable():
    """Test that classification only looks at keys, not frequency values.

    "FREQ=HOURLY" validates and parses (without a frequency), and every key
    it uses is modeled.
    """
    assert classify("FREQ=HOURLY") == Representability.FULLY_REPRESENTABLE


def test_unsupported_keys_lists_each_key_once():
    text = "FREQ=MONTHLY;BYDAY=MO;BYSETPOS=1;WKST=MO;BYSETPOS=2"
    assert unsupported_keys(text) == ["BYSETPOS", "WKST"]
    assert unsupported_keys("FREQ=DAILY") == []
    assert unsupported_keys("") == []


def test_presets_are_representable():
    for name, text in PRESETS.items():
        assert is_fully_representable(text), f"Preset {name} should be editable"


def test_classify_is_read_only():
    text = "FREQ=WEEKLY;BYSETPOS=-1"
    classify(text)
    assert text == "FREQ=WEEKLY;BYSETPOS=-1"
