"""A Python library for RFC 5545 recurrence rules and alarm triggers."""

from .alarm import AlarmTrigger, AlarmWhen, TriggerUnit, decode_trigger, encode_trigger
from .config import CodecConfig
from .ical import ICalendarBridge
from .internal.icsdate import decode_datetime, encode_datetime
from .rrule import (
    EndType,
    Frequency,
    RecurrenceConfig,
    Representability,
    classify,
    generate,
    parse,
    validate,
)
from .validation import (
    RRuleValidationError,
    StructuralViolation,
    ValidationResult,
    ViolationCode,
)

__version__ = "0.1.0"

__all__ = [
    "AlarmTrigger",
    "AlarmWhen",
    "TriggerUnit",
    "decode_trigger",
    "encode_trigger",
    "CodecConfig",
    "ICalendarBridge",
    "decode_datetime",
    "encode_datetime",
    "EndType",
    "Frequency",
    "RecurrenceConfig",
    "Representability",
    "classify",
    "generate",
    "parse",
    "validate",
    "RRuleValidationError",
    "StructuralViolation",
    "ValidationResult",
    "ViolationCode",
]
