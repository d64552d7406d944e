"""Configuration for the recurrence and alarm codec.

Values default to environment variables so that the surrounding field
validation layer can tune the length caps without code changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CodecConfig:
    """Configuration for rule and trigger handling.

    Length caps mirror the limits the event API enforces on the raw text
    fields; the codec functions themselves never cap length.
    """

    # Field length limits
    max_rrule_length: int = _env_int("ICSRULE_MAX_RRULE_LENGTH", 500)
    max_trigger_length: int = _env_int("ICSRULE_MAX_TRIGGER_LENGTH", 100)
    max_duration_length: int = _env_int("ICSRULE_MAX_DURATION_LENGTH", 50)

    # Fall back to generic date parsing for UNTIL values that are not
    # in the strict YYYYMMDDTHHmmssZ form
    lenient_until: bool = _env_bool("ICSRULE_LENIENT_UNTIL", True)


DEFAULT_CONFIG = CodecConfig()
