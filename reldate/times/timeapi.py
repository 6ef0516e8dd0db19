"""Time resolution API.

Module-level helpers backed by a process-wide default time registry.

The default registry is built lazily on first use (a guarded registry, weeks
starting on the day named by ``RELDATE_WEEK_START``, Monday if unset) and can
be replaced at any time with ``set_default_time_registry``. Replacement is a
single reference swap: calls already running keep the registry they started
with, and hosts that replace the default while other threads resolve must
synchronise that themselves.

Examples:
    >>> from reldate.times.timeapi import new_time, require_time
    >>> pivot = pd.Timestamp("2020-08-11 00:02:01")
    >>> t, ok = new_time(pivot, "start prev week")
    >>> str(t)
    '2020-08-03 00:00:00'
    >>> str(require_time(pivot, "end prev year"))
    '2019-12-31 23:59:59'
"""

from __future__ import annotations
import logging
import os
import threading
from typing import Any, Optional, Union

from reldate.times.timeregistry import new_time_registry
from reldate.times.timeshortcuts import WeekStart, normalize_week_start
from reldate.times.timevalue import Time

logger = logging.getLogger(__name__)

# Environment variable naming the first weekday of the default registry
WEEK_START_ENV = "RELDATE_WEEK_START"

_default_registry = None
_default_lock = threading.Lock()


def default_week_start() -> WeekStart:
    """
    Week start for lazily built default registries.

    Reads ``RELDATE_WEEK_START`` ("monday" or "sunday"). Unknown values are
    logged and ignored.
    """
    raw = os.getenv(WEEK_START_ENV)
    if not raw or not raw.strip():
        return WeekStart.MONDAY
    try:
        return normalize_week_start(raw)
    except ValueError:
        logger.warning(f"Ignoring {WEEK_START_ENV}={raw!r}; expected 'monday' or 'sunday'")
        return WeekStart.MONDAY


def get_default_time_registry():
    """Return the process-wide time registry, building it on first use."""
    global _default_registry
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = new_time_registry(week_start=default_week_start())
            registry = _default_registry
    return registry


def set_default_time_registry(registry) -> None:
    """
    Replace the process-wide time registry.

    Every later call to ``new_time`` / ``require_time`` /
    ``set_default_week_start`` uses the given registry.

    Args:
        registry: Any object with the time registry interface
            (``make``, ``require``, ``extend``, ``set_formatter``,
            ``set_week_start``)
    """
    global _default_registry
    if registry is None:
        raise ValueError("default time registry must not be None; use reset_default_time_registry()")
    with _default_lock:
        _default_registry = registry
    logger.info(f"Default time registry replaced with {registry!r}")


def reset_default_time_registry() -> None:
    """Drop the process-wide time registry; the next call rebuilds it."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def set_default_week_start(week_start: Union[WeekStart, str]) -> None:
    """Set the first weekday of the process-wide time registry."""
    get_default_time_registry().set_week_start(week_start)
    logger.info(f"Default week start set to {normalize_week_start(week_start).value}")


def new_time(pivot: Any, shortcut: str) -> tuple[Time, bool]:
    """
    Resolve a time shortcut with the default registry.

    Args:
        pivot: Timestamp-like reference instant
        shortcut: Time shortcut, e.g. "start prev week"

    Returns:
        (Time, True), or (Time(), False) when the shortcut is unknown
    """
    return get_default_time_registry().make(pivot, shortcut)


def require_time(pivot: Any, shortcut: str) -> Time:
    """
    Resolve a time shortcut with the default registry, Time() when unknown.

    Use it only for shortcuts known to exist; a typo silently yields the
    zero value.
    """
    return get_default_time_registry().require(pivot, shortcut)


__all__ = [
    "WEEK_START_ENV",
    "default_week_start",
    "get_default_time_registry",
    "set_default_time_registry",
    "reset_default_time_registry",
    "set_default_week_start",
    "new_time",
    "require_time",
]
