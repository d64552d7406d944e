"""Debug logging utilities for the recurrence and alarm codec."""

from __future__ import annotations

import logging

logger = logging.getLogger("py_icsrule")
rrule_logger = logging.getLogger("py_icsrule.rrule")
alarm_logger = logging.getLogger("py_icsrule.alarm")


def _attach_stream_handler(target: logging.Logger) -> None:
    target.setLevel(logging.DEBUG)

    # Create console handler
    handler = logging.StreamHandler()
    handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)

    target.addHandler(handler)

    # Don't propagate to root logger
    target.propagate = False


def setup_debug_logging() -> None:
    """Configure debug logging for all codec components."""
    _attach_stream_handler(logger)


def setup_rrule_debug_logging() -> None:
    """Configure debug logging for RRULE parsing and validation only."""
    _attach_stream_handler(rrule_logger)
