"""ICS date and date-time text codec.

RFC 5545 writes UTC date-times as ``YYYYMMDDTHHmmssZ`` and dates as
``YYYYMMDD``. Encoding always reads UTC fields so that a local
daylight-saving transition can never shift the written value.
"""

from __future__ import annotations

import re
from datetime import UTC, date, datetime

ICS_DATETIME_RE = re.compile(r"[0-9]{8}T[0-9]{6}Z")
ICS_DATE_RE = re.compile(r"[0-9]{8}")


def _to_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def encode_datetime(dt: datetime) -> str:
    """Format a timestamp as ``YYYYMMDDTHHmmssZ``.

    Naive datetimes are taken to be UTC. Microseconds are dropped.

    Args:
        dt: Timestamp to format

    Returns:
        ICS UTC date-time string (e.g., "20250115T100000Z")
    """
    dt = _to_utc(dt)
    return (
        f"{dt.year:04d}{dt.month:02d}{dt.day:02d}"
        f"T{dt.hour:02d}{dt.minute:02d}{dt.second:02d}Z"
    )


def decode_datetime(text: str) -> datetime | None:
    """Parse a ``YYYYMMDDTHHmmssZ`` string into an aware UTC datetime.

    Fields are read from fixed character offsets.

    Returns:
        UTC datetime, or None if the text is malformed or a field is
        out of range
    """
    if not ICS_DATETIME_RE.fullmatch(text):
        return None

    year = int(text[0:4])
    month = int(text[4:6])
    day = int(text[6:8])
    hours = int(text[9:11])
    minutes = int(text[11:13])
    seconds = int(text[13:15])

    try:
        return datetime(year, month, day, hours, minutes, seconds, tzinfo=UTC)
    except ValueError:
        return None


def encode_date(value: date) -> str:
    """Format a date as ``YYYYMMDD``.

    Datetimes are converted to UTC before their date is taken.
    """
    if isinstance(value, datetime):
        value = _to_utc(value).date()
    return f"{value.year:04d}{value.month:02d}{value.day:02d}"


def decode_date(text: str) -> date | None:
    """Parse a ``YYYYMMDD`` string, returning None if malformed."""
    if not ICS_DATE_RE.fullmatch(text):
        return None
    try:
        return date(int(text[0:4]), int(text[4:6]), int(text[6:8]))
    except ValueError:
        return None


def decode_ics(text: str | None) -> datetime | None:
    """Parse either ICS form into a UTC datetime.

    Date-only values map to midnight UTC.
    """
    if not text or not text.strip():
        return None

    clean = text.strip()
    if len(clean) == 16:
        return decode_datetime(clean)

    day = decode_date(clean)
    if day is None:
        return None
    return datetime(day.year, day.month, day.day, tzinfo=UTC)
