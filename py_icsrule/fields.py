"""Field-level validation of the raw text values stored with an event.

These checks add the length caps the event API enforces on top of the
structural checks, so a form or request handler can report a single reason
per field.
"""

from __future__ import annotations

from .alarm.duration import parse_duration
from .alarm.trigger import decode_trigger
from .config import DEFAULT_CONFIG, CodecConfig
from .rrule.validator import validate
from .validation import VALID, ValidationResult, ViolationCode


def _too_long(field: str, limit: int) -> ValidationResult:
    return ValidationResult.invalid(
        ViolationCode.FIELD_TOO_LONG, f"{field} must be at most {limit} characters"
    )


def validate_rrule_field(text: str | None, config: CodecConfig | None = None) -> ValidationResult:
    """Validate an event's ``rrule`` field. Empty means no recurrence."""
    config = config or DEFAULT_CONFIG
    if text and len(text) > config.max_rrule_length:
        return _too_long("RRULE", config.max_rrule_length)
    return validate(text)


def validate_trigger_field(
    text: str | None, config: CodecConfig | None = None
) -> ValidationResult:
    """Validate an alarm's ``trigger`` field.

    The trigger is required. Surrounding whitespace is ignored.
    """
    config = config or DEFAULT_CONFIG
    value = (text or "").strip()
    if not value:
        return ValidationResult.invalid(ViolationCode.FIELD_REQUIRED, "Trigger is required")
    if len(value) > config.max_trigger_length:
        return _too_long("Trigger", config.max_trigger_length)
    if decode_trigger(value) is None:
        return ValidationResult.invalid(
            ViolationCode.INVALID_TRIGGER,
            f"Trigger must be a non-zero duration like -PT15M or a date-time "
            f"like 20250115T100000Z, got {value!r}",
        )
    return VALID


def validate_duration_field(
    text: str | None, config: CodecConfig | None = None
) -> ValidationResult:
    """Validate an alarm's optional ``duration`` field."""
    config = config or DEFAULT_CONFIG
    value = (text or "").strip()
    if not value:
        return VALID
    if len(value) > config.max_duration_length:
        return _too_long("Duration", config.max_duration_length)
    if parse_duration(value) is None:
        return ValidationResult.invalid(
            ViolationCode.INVALID_DURATION,
            f"Duration must be a non-zero duration like PT5M, got {value!r}",
        )
    return VALID
