"""Best-effort RRULE text to RecurrenceConfig conversion.

The parser is lenient: keys outside the modeled subset and values it cannot
read are skipped rather than reported. Use the validator for structural
errors and the analyzer to find out whether skipping lost anything.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from dateutil import parser as date_parser

from ..config import DEFAULT_CONFIG, CodecConfig
from ..internal.icsdate import decode_datetime
from ..internal.internal import iter_tokens, parse_int, split_list
from .rrule import WEEKDAYS, EndType, Frequency, RecurrenceConfig

logger = logging.getLogger("py_icsrule.rrule")


def parse_until(value: str, lenient: bool = True) -> datetime | None:
    """Parse an UNTIL value.

    The strict ``YYYYMMDDTHHmmssZ`` form is tried first. With ``lenient``
    set, any full ISO 8601 date or date-time is accepted too (e.g.
    "2025-01-15T10:00:00Z" or a date-only "20250115"); naive results are
    taken as UTC. Values without a full date, such as "15" or "10:00", are
    rejected rather than completed from the current date.

    Returns:
        Aware UTC datetime, or None if the value cannot be read
    """
    until = decode_datetime(value)
    if until is not None or not lenient:
        return until

    try:
        until = date_parser.isoparse(value)
        if until.tzinfo is None:
            return until.replace(tzinfo=UTC)
        return until.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def parse(text: str | None, config: CodecConfig | None = None) -> RecurrenceConfig | None:
    """Parse RRULE text into a RecurrenceConfig.

    Args:
        text: RRULE value without the "RRULE:" prefix
              (e.g., "FREQ=WEEKLY;INTERVAL=2;BYDAY=MO,WE")
        config: Codec configuration (uses default if None)

    Returns:
        RecurrenceConfig, or None for empty/whitespace-only text. A config
        whose frequency is None means "no recurrence" (for example for
        "FREQ=HOURLY"), not a parse failure.

    Example:
        >>> parse("FREQ=MONTHLY;BYMONTHDAY=31").by_month_day
        31
    """
    if not text or not text.strip():
        return None

    config = config or DEFAULT_CONFIG

    frequency: Frequency | None = None
    interval = 1
    end_type = EndType.NEVER
    count: int | None = None
    until: datetime | None = None
    by_day: list[str] = []
    by_month_day: int | None = None
    by_month: list[int] = []

    for key, value in iter_tokens(text):
        if not key or not value:
            continue

        if key == "FREQ":
            if value in Frequency.__members__:
                frequency = Frequency(value)
            else:
                logger.debug(f"RRULE: frequency {value!r} not editable, leaving it unset")

        elif key == "INTERVAL":
            parsed = parse_int(value)
            interval = parsed if parsed is not None and parsed >= 1 else 1

        elif key == "COUNT":
            parsed = parse_int(value)
            if parsed is None or parsed < 1:
                logger.debug(f"RRULE: skipping invalid COUNT {value!r}")
                continue
            end_type, count, until = EndType.COUNT, parsed, None

        elif key == "UNTIL":
            parsed_until = parse_until(value, lenient=config.lenient_until)
            if parsed_until is None:
                logger.debug(f"RRULE: skipping unreadable UNTIL {value!r}")
                continue
            end_type, count, until = EndType.UNTIL, None, parsed_until

        elif key == "BYDAY":
            by_day = [code for code in split_list(value) if code in WEEKDAYS]

        elif key == "BYMONTHDAY":
            parsed = parse_int(value)
            by_month_day = parsed if parsed is not None and 1 <= parsed <= 31 else None

        elif key == "BYMONTH":
            months = (parse_int(item) for item in split_list(value))
            by_month = [m for m in months if m is not None and 1 <= m <= 12]

        else:
            logger.debug(f"RRULE: skipping unmodeled key {key}")

    return RecurrenceConfig(
        frequency=frequency,
        interval=interval,
        end_type=end_type,
        count=count,
        until=until,
        by_day=tuple(by_day),
        by_month_day=by_month_day,
        by_month=tuple(by_month),
    )
