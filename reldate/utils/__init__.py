"""Shared utilities for the reldate package."""

from reldate.utils.calendar import (
    DAY_END,
    to_pivot,
    localize,
    day_start,
    day_end,
    shift_days,
    shift_months,
    span_first_day,
    span_last_day,
)
from reldate.utils.locking import ReadWriteLock
from reldate.utils.suggest import closest_shortcuts

__all__ = [
    # Calendar helpers
    "DAY_END",
    "to_pivot",
    "localize",
    "day_start",
    "day_end",
    "shift_days",
    "shift_months",
    "span_first_day",
    "span_last_day",
    # Concurrency
    "ReadWriteLock",
    # Diagnostics
    "closest_shortcuts",
]
