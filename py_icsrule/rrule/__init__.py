"""RRULE support for py-icsrule."""

from .analyzer import Representability, classify, is_fully_representable, unsupported_keys
from .generator import generate
from .parser import parse, parse_until
from .rrule import (
    PRESETS,
    RFC_FREQUENCIES,
    SUPPORTED_KEYS,
    WEEKDAYS,
    EndType,
    Frequency,
    RecurrenceConfig,
)
from .validator import validate

__all__ = [
    "EndType",
    "Frequency",
    "RecurrenceConfig",
    "PRESETS",
    "RFC_FREQUENCIES",
    "SUPPORTED_KEYS",
    "WEEKDAYS",
    "Representability",
    "classify",
    "is_fully_representable",
    "unsupported_keys",
    "generate",
    "parse",
    "parse_until",
    "validate",
]
