"""RecurrenceConfig to canonical RRULE text."""

from __future__ import annotations

from ..internal.icsdate import encode_datetime
from .rrule import EndType, Frequency, RecurrenceConfig


def generate(config: RecurrenceConfig) -> str:
    """Generate RRULE text from a RecurrenceConfig.

    Parts are always emitted in the same order: FREQ, INTERVAL (only when
    greater than 1), COUNT or UNTIL, then the BY* part belonging to the
    frequency. BY* fields that do not belong to the frequency are ignored.

    Args:
        config: Recurrence configuration

    Returns:
        RRULE string (e.g., "FREQ=WEEKLY;INTERVAL=2;COUNT=10;BYDAY=MO,WE,FR"),
        or an empty string when there is no recurrence

    Example:
        >>> generate(RecurrenceConfig(frequency=Frequency.MONTHLY, by_month_day=31))
        'FREQ=MONTHLY;BYMONTHDAY=31'
    """
    if config.frequency is None:
        return ""

    parts = [f"FREQ={config.frequency.value}"]

    if config.interval > 1:
        parts.append(f"INTERVAL={config.interval}")

    if config.end_type == EndType.COUNT and config.count:
        parts.append(f"COUNT={config.count}")
    elif config.end_type == EndType.UNTIL and config.until is not None:
        parts.append(f"UNTIL={encode_datetime(config.until)}")

    if config.frequency == Frequency.WEEKLY and config.by_day:
        parts.append(f"BYDAY={','.join(config.by_day)}")
    elif config.frequency == Frequency.MONTHLY and config.by_month_day:
        parts.append(f"BYMONTHDAY={config.by_month_day}")
    elif config.frequency == Frequency.YEARLY and config.by_month:
        parts.append(f"BYMONTH={','.join(str(m) for m in config.by_month)}")

    return ";".join(parts)
