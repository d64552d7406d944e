"""Tests for structural RRULE validation."""

import pytest

from py_icsrule.rrule import validate
from py_icsrule.validation import RRuleValidationError, ViolationCode


@pytest.mark.parametrize("text", [None, "", "   "])
def test_empty_rule_is_valid(text):
    """Test that no text means no recurrence, which is valid."""
    assert validate(text).valid


@pytest.mark.parametrize(
    "text",
    [
        "FREQ=DAILY",
        "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE,FR",
        "FREQ=MONTHLY;BYDAY=1MO;BYSETPOS=1",
        "FREQ=YEARLY;UNTIL=20300101T000000Z",
        "FREQ=SECONDLY;COUNT=3",
        "FREQ=MINUTELY",
        "FREQ=HOURLY;INTERVAL=4",
    ],
)
def test_valid_rules(text):
    result = validate(text)
    assert result.valid, f"Expected {text!r} to be valid, got {result.reason}"
    assert result.violation is None


@pytest.mark.parametrize(
    "text, code",
    [
        ("COUNT=5", ViolationCode.MISSING_FREQ),
        ("INTERVAL=2;BYDAY=MO", ViolationCode.MISSING_FREQ),
        ("FREQ=FORTNIGHTLY", ViolationCode.INVALID_FREQ),
        ("FREQ=", ViolationCode.INVALID_FREQ),
        ("FREQ=daily", ViolationCode.INVALID_FREQ),
        ("FREQ=DAILY;COUNT=5;UNTIL=20250101T000000Z", ViolationCode.COUNT_AND_UNTIL),
        ("FREQ=DAILY;COUNT=0", ViolationCode.INVALID_COUNT),
        ("FREQ=DAILY;COUNT=abc", ViolationCode.INVALID_COUNT),
        ("FREQ=DAILY;COUNT=", ViolationCode.INVALID_COUNT),
        ("FREQ=DAILY;INTERVAL=0", ViolationCode.INVALID_INTERVAL),
        ("FREQ=DAILY;INTERVAL=-2", ViolationCode.INVALID_INTERVAL),
    ],
)
def test_invalid_rules(text, code):
    result = validate(text)

    assert not result.valid, f"Expected {text!r} to be invalid"
    assert result.violation.code == code, f"Expected {code}, got {result.violation.code}"
    assert result.reason, "Violation must carry a reason"


def test_checks_run_in_order():
    """Test that the first failing check is the one reported."""
    result = validate("FREQ=BOGUS;COUNT=0;UNTIL=20250101T000000Z")
    assert result.violation.code == ViolationCode.INVALID_FREQ

    result = validate("FREQ=DAILY;COUNT=0;UNTIL=20250101T000000Z;INTERVAL=0")
    assert result.violation.code == ViolationCode.COUNT_AND_UNTIL

    result = validate("FREQ=DAILY;COUNT=0;INTERVAL=0")
    assert result.violation.code == ViolationCode.INVALID_COUNT


def test_validation_is_idempotent():
    text = "FREQ=DAILY;COUNT=5;UNTIL=20250101T000000Z"
    assert validate(text) == validate(text)


def test_result_truthiness():
    assert validate("FREQ=DAILY")
    assert not validate("COUNT=5")


def test_raise_for_violation():
    validate("FREQ=DAILY").raise_for_violation()

    with pytest.raises(RRuleValidationError, match="MISSING_FREQ") as exc_info:
        validate("COUNT=5").raise_for_violation()

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.violation.code == ViolationCode.MISSING_FREQ
