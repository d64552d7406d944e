"""VALARM TRIGGER codec (RFC 5545 section 3.8.6.3).

A trigger is either a signed duration relative to the event start
("-PT15M" is 15 minutes before) or an absolute UTC date-time. The editor
shows a single value/unit pair, so reading a multi-unit duration keeps only
its coarsest non-zero unit: "-P1DT2H30M" reads as 1 day before.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from enum import Enum

from .duration import split_duration

logger = logging.getLogger("py_icsrule.alarm")

ABSOLUTE_TRIGGER_RE = re.compile(r"[0-9]{8}T[0-9]{6}Z?")


class AlarmWhen(str, Enum):
    """When an alarm fires relative to the event start."""

    BEFORE = "BEFORE"
    AT = "AT"
    AFTER = "AFTER"


class TriggerUnit(str, Enum):
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"


@dataclass(frozen=True)
class AlarmTrigger:
    """Editable alarm trigger.

    ``value`` and ``unit`` are ignored for ``AT`` (absolute) triggers.
    """

    when: AlarmWhen
    value: int = 0
    unit: TriggerUnit = TriggerUnit.MINUTES

    def __post_init__(self) -> None:
        if not isinstance(self.when, AlarmWhen):
            object.__setattr__(self, "when", AlarmWhen(self.when))
        if not isinstance(self.unit, TriggerUnit):
            object.__setattr__(self, "unit", TriggerUnit(self.unit))
        if self.value < 0:
            raise ValueError(f"trigger value must not be negative, got {self.value}")

    @classmethod
    def default(cls) -> AlarmTrigger:
        """Trigger used for a new alarm or one whose text cannot be read."""
        return cls(AlarmWhen.BEFORE, 15, TriggerUnit.MINUTES)

    def with_when(self, when: AlarmWhen | str) -> AlarmTrigger:
        """Switch between before, at and after.

        Switching to AT resets to 0 minutes. Switching away from AT starts
        from the default 15 minutes. Switching between BEFORE and AFTER
        keeps the value and unit.
        """
        when = AlarmWhen(when)
        if when == AlarmWhen.AT:
            return AlarmTrigger(AlarmWhen.AT, 0, TriggerUnit.MINUTES)
        if self.when == AlarmWhen.AT:
            return replace(AlarmTrigger.default(), when=when)
        return replace(self, when=when)

    def encode(self) -> str:
        return encode_trigger(self.when, self.value, self.unit)


def is_absolute_trigger(text: str) -> bool:
    """Check if ``text`` is an absolute YYYYMMDDTHHmmss[Z] trigger."""
    return ABSOLUTE_TRIGGER_RE.fullmatch(text) is not None


def decode_trigger(text: str | None) -> AlarmTrigger | None:
    """Parse a TRIGGER value into an AlarmTrigger.

    Args:
        text: Duration (e.g., "-PT15M", "PT1H", "P2D") or absolute
              date-time (e.g., "20250115T100000Z")

    Returns:
        AlarmTrigger, or None if the text is empty, unrecognized, or a
        zero-length duration

    Example:
        >>> decode_trigger("-P1DT2H30M")
        AlarmTrigger(when=<AlarmWhen.BEFORE: 'BEFORE'>, value=1, unit=<TriggerUnit.DAYS: 'DAYS'>)
    """
    if not text or not text.strip():
        return None

    text = text.strip()
    if is_absolute_trigger(text):
        return AlarmTrigger(AlarmWhen.AT, 0, TriggerUnit.MINUTES)

    parts = split_duration(text)
    if parts is None:
        logger.debug(f"TRIGGER: unrecognized value {text!r}")
        return None

    when = AlarmWhen.BEFORE if parts.negative else AlarmWhen.AFTER

    if parts.days > 0:
        return AlarmTrigger(when, parts.days, TriggerUnit.DAYS)
    if parts.hours > 0:
        return AlarmTrigger(when, parts.hours, TriggerUnit.HOURS)
    if parts.minutes > 0:
        return AlarmTrigger(when, parts.minutes, TriggerUnit.MINUTES)

    # Zero, or seconds only
    return None


def encode_trigger(
    when: AlarmWhen | str,
    value: int,
    unit: TriggerUnit | str = TriggerUnit.MINUTES,
) -> str:
    """Format a trigger as a single-unit duration.

    Args:
        when: BEFORE, AT or AFTER
        value: Number of units
        unit: MINUTES, HOURS or DAYS

    Raises:
        ValueError: If ``value`` is negative for a relative trigger

    Returns:
        Duration string, signed only for BEFORE (e.g., "-PT15M"). AT
        returns an empty string: an absolute trigger needs the event start,
        which the caller supplies separately.
    """
    when = AlarmWhen(when)
    if when == AlarmWhen.AT:
        return ""
    if value < 0:
        raise ValueError(f"trigger value must not be negative, got {value}")

    prefix = "-" if when == AlarmWhen.BEFORE else ""
    unit = TriggerUnit(unit)

    if unit == TriggerUnit.DAYS:
        return f"{prefix}P{value}D"
    if unit == TriggerUnit.HOURS:
        return f"{prefix}PT{value}H"
    return f"{prefix}PT{value}M"
