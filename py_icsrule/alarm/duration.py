"""ISO 8601 durations as used by RFC 5545 (section 3.3.6).

Only the single-unit form the editor produces is ever written. Reading
accepts any RFC duration and reports its coarsest non-zero unit.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum

DURATION_RE = re.compile(
    r"(?P<sign>[+-])?P"
    r"(?:(?P<weeks>[0-9]+)W)?"
    r"(?:(?P<days>[0-9]+)D)?"
    r"(?:T(?:(?P<hours>[0-9]+)H)?(?:(?P<minutes>[0-9]+)M)?(?:(?P<seconds>[0-9]+)S)?)?"
)


@dataclass(frozen=True)
class DurationParts:
    """Components of a duration string. Weeks are folded into days."""

    negative: bool
    days: int
    hours: int
    minutes: int
    seconds: int


def split_duration(text: str | None) -> DurationParts | None:
    """Split a duration string into its components.

    Returns:
        DurationParts, or None if ``text`` is not an ISO 8601 duration
    """
    if not text:
        return None

    match = DURATION_RE.fullmatch(text.strip())
    if match is None:
        return None

    def field(name: str) -> int:
        value = match.group(name)
        return int(value) if value else 0

    return DurationParts(
        negative=match.group("sign") == "-",
        days=field("weeks") * 7 + field("days"),
        hours=field("hours"),
        minutes=field("minutes"),
        seconds=field("seconds"),
    )


class DurationUnit(str, Enum):
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"


@dataclass(frozen=True)
class Duration:
    """A single-unit duration such as the VALARM DURATION property."""

    value: int
    unit: DurationUnit = DurationUnit.MINUTES

    def to_minutes(self) -> int:
        """Total minutes, rounding seconds up."""
        if self.unit == DurationUnit.DAYS:
            return self.value * 24 * 60
        if self.unit == DurationUnit.HOURS:
            return self.value * 60
        if self.unit == DurationUnit.SECONDS:
            return math.ceil(self.value / 60)
        return self.value


def format_duration(value: int, unit: DurationUnit | str) -> str:
    """Format a single-unit duration.

    Args:
        value: Number of units
        unit: Duration unit

    Returns:
        Duration string (e.g., "PT5M", "PT1H", "P2D", "PT30S"), or an empty
        string for a value of 0 or less
    """
    if value <= 0:
        return ""

    unit = DurationUnit(unit)
    if unit == DurationUnit.DAYS:
        return f"P{value}D"
    if unit == DurationUnit.HOURS:
        return f"PT{value}H"
    if unit == DurationUnit.SECONDS:
        return f"PT{value}S"
    return f"PT{value}M"


def parse_duration(text: str | None) -> Duration | None:
    """Parse a duration string into its coarsest non-zero unit.

    The sign, if any, is ignored. "P1DT2H" reads as 1 day.

    Returns:
        Duration, or None if the text is empty, malformed or zero
    """
    parts = split_duration(text)
    if parts is None:
        return None

    if parts.days > 0:
        return Duration(parts.days, DurationUnit.DAYS)
    if parts.hours > 0:
        return Duration(parts.hours, DurationUnit.HOURS)
    if parts.minutes > 0:
        return Duration(parts.minutes, DurationUnit.MINUTES)
    if parts.seconds > 0:
        return Duration(parts.seconds, DurationUnit.SECONDS)
    return None


def is_valid_duration(text: str | None) -> bool:
    return parse_duration(text) is not None


def duration_to_minutes(text: str | None) -> int | None:
    """Convert a duration string to minutes, or None if it is invalid."""
    duration = parse_duration(text)
    if duration is None:
        return None
    return duration.to_minutes()
