"""Validation outcome types.

Malformed or structurally invalid text is an ordinary result, not an
exception: validators return a ValidationResult and callers decide how to
surface it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViolationCode(str, Enum):
    """Why a rule or trigger value was rejected."""

    MISSING_FREQ = "MISSING_FREQ"
    INVALID_FREQ = "INVALID_FREQ"
    COUNT_AND_UNTIL = "COUNT_AND_UNTIL"
    INVALID_COUNT = "INVALID_COUNT"
    INVALID_INTERVAL = "INVALID_INTERVAL"
    FIELD_REQUIRED = "FIELD_REQUIRED"
    FIELD_TOO_LONG = "FIELD_TOO_LONG"
    INVALID_TRIGGER = "INVALID_TRIGGER"
    INVALID_DURATION = "INVALID_DURATION"
    MALFORMED_RRULE = "MALFORMED_RRULE"


@dataclass(frozen=True)
class StructuralViolation:
    """A broken rule with a human-readable reason for field-level messages."""

    code: ViolationCode
    reason: str


class RRuleValidationError(ValueError):
    """Raised by ValidationResult.raise_for_violation()."""

    def __init__(self, violation: StructuralViolation):
        self.violation = violation
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.violation.code.value}: {self.violation.reason}"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation: valid, or a single violation."""

    violation: StructuralViolation | None = None

    @property
    def valid(self) -> bool:
        return self.violation is None

    @property
    def reason(self) -> str | None:
        return self.violation.reason if self.violation else None

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_violation(self) -> None:
        """Raise RRuleValidationError if the result is invalid."""
        if self.violation is not None:
            raise RRuleValidationError(self.violation)

    @classmethod
    def invalid(cls, code: ViolationCode, reason: str) -> ValidationResult:
        return cls(StructuralViolation(code, reason))


VALID = ValidationResult()
