"""Representability analysis for raw RRULE text.

The structured editor can only rebuild rules that use the modeled keys.
Anything else (BYSETPOS, BYYEARDAY, BYWEEKNO, WKST, ...) would be silently
dropped by the parser, so such rules are flagged before an edit starts.
Offering to discard and rebuild the rule is up to the caller.
"""

from __future__ import annotations

from enum import Enum

from ..internal.internal import iter_tokens
from .parser import parse
from .rrule import SUPPORTED_KEYS


class Representability(str, Enum):
    """Whether a raw rule survives the structured editor without loss."""

    FULLY_REPRESENTABLE = "FULLY_REPRESENTABLE"
    HAS_UNSUPPORTED_EXTENSIONS = "HAS_UNSUPPORTED_EXTENSIONS"


def unsupported_keys(text: str | None) -> list[str]:
    """List the keys of ``text`` the structured editor cannot represent.

    Returns:
        Unsupported keys in order of first appearance, without duplicates
    """
    if not text:
        return []

    keys: list[str] = []
    for key, _ in iter_tokens(text):
        if key and key not in SUPPORTED_KEYS and key not in keys:
            keys.append(key)
    return keys


def classify(text: str | None) -> Representability:
    """Classify a raw rule.

    A rule is fully representable when every key is one of FREQ, INTERVAL,
    COUNT, UNTIL, BYDAY, BYMONTHDAY, BYMONTH and the parser produces a
    configuration from it. Empty text has nothing to lose and is fully
    representable.

    Note that a representable rule may still parse without a frequency
    (e.g. "FREQ=HOURLY"); this only answers whether unmodeled keys exist.

    Example:
        >>> classify("FREQ=WEEKLY;BYSETPOS=-1")
        <Representability.HAS_UNSUPPORTED_EXTENSIONS: 'HAS_UNSUPPORTED_EXTENSIONS'>
    """
    if not text or not text.strip():
        return Representability.FULLY_REPRESENTABLE

    if parse(text) is None or unsupported_keys(text):
        return Representability.HAS_UNSUPPORTED_EXTENSIONS

    return Representability.FULLY_REPRESENTABLE


def is_fully_representable(text: str | None) -> bool:
    """Check if ``text`` can be edited through the structured editor."""
    return classify(text) == Representability.FULLY_REPRESENTABLE
