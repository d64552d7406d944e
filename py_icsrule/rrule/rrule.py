"""Recurrence rule types.

RRULE is defined in RFC 5545 section 3.3.10. Only the subset that the
structured editor can represent is modeled here; see the analyzer for
detecting rules that use more than this subset.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from enum import Enum
from typing import TypeVar

T = TypeVar("T")


class Frequency(str, Enum):
    """User-facing recurrence frequencies."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class EndType(str, Enum):
    """How a recurrence ends."""

    NEVER = "NEVER"
    COUNT = "COUNT"
    UNTIL = "UNTIL"


# All FREQ values allowed by RFC 5545, including the sub-daily ones the
# editor does not offer
RFC_FREQUENCIES = frozenset(
    ["SECONDLY", "MINUTELY", "HOURLY", "DAILY", "WEEKLY", "MONTHLY", "YEARLY"]
)

# Two-letter weekday codes in ISO order (Monday first)
WEEKDAYS = ("MO", "TU", "WE", "TH", "FR", "SA", "SU")

# RRULE keys the structured editor can represent
SUPPORTED_KEYS = frozenset(
    ["FREQ", "INTERVAL", "COUNT", "UNTIL", "BYDAY", "BYMONTHDAY", "BYMONTH"]
)

# Quick-pick rules offered before a frequency is chosen
PRESETS: dict[str, str] = {
    "daily": "FREQ=DAILY",
    "weekly": "FREQ=WEEKLY",
    "monthly": "FREQ=MONTHLY",
    "weekdays": "FREQ=WEEKLY;BYDAY=MO,TU,WE,TH,FR",
    "yearly": "FREQ=YEARLY",
}


def _unique(items: Iterable[T]) -> tuple[T, ...]:
    seen: list[T] = []
    for item in items:
        if item not in seen:
            seen.append(item)
    return tuple(seen)


@dataclass(frozen=True)
class RecurrenceConfig:
    """Editable recurrence configuration.

    Instances are immutable. Every edit goes through one of the ``with_*``,
    ``ending_*`` or ``toggle_*`` methods, which return a new config, so a
    reader never observes a half-applied change such as ``end_type=COUNT``
    next to a stale ``until``.

    When ``frequency`` is None there is no recurrence and every other field
    is ignored.
    """

    frequency: Frequency | None = None
    interval: int = 1
    end_type: EndType = EndType.NEVER
    count: int | None = None
    until: datetime | None = None
    by_day: tuple[str, ...] = ()
    by_month_day: int | None = None
    by_month: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if self.frequency is not None and not isinstance(self.frequency, Frequency):
            object.__setattr__(self, "frequency", Frequency(self.frequency))
        if not isinstance(self.end_type, EndType):
            object.__setattr__(self, "end_type", EndType(self.end_type))
        object.__setattr__(self, "by_day", _unique(self.by_day))
        object.__setattr__(self, "by_month", _unique(self.by_month))
        if self.until is not None:
            until = self.until
            if until.tzinfo is None:
                until = until.replace(tzinfo=UTC)
            object.__setattr__(self, "until", until.astimezone(UTC))

        if self.interval < 1:
            raise ValueError(f"interval must be at least 1, got {self.interval}")

        if self.end_type == EndType.COUNT:
            if self.count is None or self.count < 1:
                raise ValueError(f"COUNT end requires a positive count, got {self.count}")
            if self.until is not None:
                raise ValueError("COUNT end must not carry an until date")
        elif self.end_type == EndType.UNTIL:
            if self.until is None:
                raise ValueError("UNTIL end requires an until date")
            if self.count is not None:
                raise ValueError("UNTIL end must not carry a count")
        elif self.count is not None or self.until is not None:
            raise ValueError("NEVER end must not carry a count or until date")

        for code in self.by_day:
            if code not in WEEKDAYS:
                raise ValueError(f"invalid weekday code: {code!r}")
        if self.by_month_day is not None and not 1 <= self.by_month_day <= 31:
            raise ValueError(f"month day must be in 1..31, got {self.by_month_day}")
        for month in self.by_month:
            if not 1 <= month <= 12:
                raise ValueError(f"month must be in 1..12, got {month}")

    @classmethod
    def none(cls) -> RecurrenceConfig:
        """Return the default configuration for a new event (no recurrence)."""
        return cls()

    @property
    def is_recurring(self) -> bool:
        """Check if the configuration describes a recurrence."""
        return self.frequency is not None

    def with_frequency(self, frequency: Frequency | str | None) -> RecurrenceConfig:
        """Change the frequency.

        BYDAY, BYMONTHDAY and BYMONTH only make sense for one frequency each,
        so all of them are cleared.
        """
        if frequency is not None:
            frequency = Frequency(frequency)
        return replace(self, frequency=frequency, by_day=(), by_month_day=None, by_month=())

    def with_interval(self, interval: int) -> RecurrenceConfig:
        return replace(self, interval=interval)

    def ending_never(self) -> RecurrenceConfig:
        return replace(self, end_type=EndType.NEVER, count=None, until=None)

    def ending_after(self, count: int) -> RecurrenceConfig:
        """End after ``count`` occurrences, clearing any until date."""
        return replace(self, end_type=EndType.COUNT, count=count, until=None)

    def ending_on(self, until: datetime) -> RecurrenceConfig:
        """End on ``until``, clearing any count."""
        return replace(self, end_type=EndType.UNTIL, count=None, until=until)

    def toggle_day(self, code: str) -> RecurrenceConfig:
        """Add or remove a weekday code from BYDAY."""
        if code in self.by_day:
            by_day = tuple(d for d in self.by_day if d != code)
        else:
            by_day = self.by_day + (code,)
        return replace(self, by_day=by_day)

    def with_month_day(self, day: int | None) -> RecurrenceConfig:
        return replace(self, by_month_day=day)

    def toggle_month(self, month: int) -> RecurrenceConfig:
        """Add or remove a month number from BYMONTH."""
        if month in self.by_month:
            by_month = tuple(m for m in self.by_month if m != month)
        else:
            by_month = self.by_month + (month,)
        return replace(self, by_month=by_month)
