"""Low-level helpers shared by the RRULE parser, validator and analyzer."""

from __future__ import annotations

import re
from collections.abc import Iterator

# Optional sign followed by ASCII digits
INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def iter_parts(text: str) -> Iterator[str]:
    """Yield the stripped ``;``-separated parts of a rule value.

    Empty parts (from doubled or trailing separators) are skipped.
    """
    for part in text.split(";"):
        part = part.strip()
        if part:
            yield part


def split_part(part: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` part at its first ``=``.

    A part without ``=`` yields an empty value.
    """
    key, _, value = part.partition("=")
    return key.strip(), value.strip()


def iter_tokens(text: str) -> Iterator[tuple[str, str]]:
    """Yield ``(key, value)`` pairs for every part of a rule value."""
    for part in iter_parts(text):
        yield split_part(part)


def parse_int(value: str) -> int | None:
    """Parse a base-10 integer, returning None if it is not one."""
    value = value.strip()
    if not INTEGER_RE.fullmatch(value):
        return None
    return int(value)


def split_list(value: str) -> list[str]:
    """Split a comma-separated value list, dropping empty items."""
    return [item.strip() for item in value.split(",") if item.strip()]
