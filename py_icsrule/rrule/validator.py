"""Structural RRULE validation (RFC 5545 section 3.3.10).

The validator reads raw text directly instead of going through the parser,
because imported rules may use keys the parser does not model. It accepts
all seven RFC frequencies, including the sub-daily ones the editor cannot
produce.
"""

from __future__ import annotations

import logging

from ..internal.internal import iter_tokens, parse_int
from ..validation import VALID, ValidationResult, ViolationCode
from .rrule import RFC_FREQUENCIES

logger = logging.getLogger("py_icsrule.rrule")


def _first(tokens: list[tuple[str, str]], key: str) -> str | None:
    for token_key, value in tokens:
        if token_key == key:
            return value
    return None


def _invalid(code: ViolationCode, reason: str) -> ValidationResult:
    logger.debug(f"RRULE: {code.value}: {reason}")
    return ValidationResult.invalid(code, reason)


def validate(text: str | None) -> ValidationResult:
    """Validate RRULE structure.

    Checks, in order:
    1. Empty or whitespace-only text is valid (no recurrence)
    2. A FREQ part must be present
    3. FREQ must be one of the seven RFC 5545 frequencies
    4. UNTIL and COUNT must not both be present
    5. COUNT, if present, must be an integer >= 1
    6. INTERVAL, if present, must be an integer >= 1

    Args:
        text: RRULE value without the "RRULE:" prefix

    Returns:
        ValidationResult; falsy with a StructuralViolation for the first
        failing check

    Example:
        >>> validate("FREQ=DAILY;COUNT=5;UNTIL=20250101T000000Z").valid
        False
    """
    if not text or not text.strip():
        return VALID

    tokens = list(iter_tokens(text))

    freq = _first(tokens, "FREQ")
    if freq is None:
        return _invalid(ViolationCode.MISSING_FREQ, "RRULE must contain a FREQ part")

    if freq not in RFC_FREQUENCIES:
        return _invalid(
            ViolationCode.INVALID_FREQ,
            f"FREQ must be one of {', '.join(sorted(RFC_FREQUENCIES))}, got {freq!r}",
        )

    count = _first(tokens, "COUNT")
    if count is not None and _first(tokens, "UNTIL") is not None:
        return _invalid(
            ViolationCode.COUNT_AND_UNTIL, "UNTIL and COUNT are mutually exclusive"
        )

    if count is not None:
        parsed = parse_int(count)
        if parsed is None or parsed < 1:
            return _invalid(
                ViolationCode.INVALID_COUNT,
                f"COUNT must be an integer of at least 1, got {count!r}",
            )

    interval = _first(tokens, "INTERVAL")
    if interval is not None:
        parsed = parse_int(interval)
        if parsed is None or parsed < 1:
            return _invalid(
                ViolationCode.INVALID_INTERVAL,
                f"INTERVAL must be an integer of at least 1, got {interval!r}",
            )

    return VALID
