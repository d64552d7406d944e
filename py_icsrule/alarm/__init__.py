"""Alarm trigger and duration support for py-icsrule."""

from .duration import (
    Duration,
    DurationUnit,
    duration_to_minutes,
    format_duration,
    is_valid_duration,
    parse_duration,
)
from .trigger import (
    AlarmTrigger,
    AlarmWhen,
    TriggerUnit,
    decode_trigger,
    encode_trigger,
    is_absolute_trigger,
)

__all__ = [
    "AlarmTrigger",
    "AlarmWhen",
    "TriggerUnit",
    "decode_trigger",
    "encode_trigger",
    "is_absolute_trigger",
    "Duration",
    "DurationUnit",
    "duration_to_minutes",
    "format_duration",
    "is_valid_duration",
    "parse_duration",
]
