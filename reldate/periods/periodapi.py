"""Period resolution API.

Module-level helpers backed by a process-wide default period registry.

The default is built lazily on first use. It owns its own time registry
(weeks starting on the day named by ``RELDATE_WEEK_START``), independent of
the default time registry: ``set_default_week_start`` does not affect it.
Replace it wholesale with ``set_default_period_registry``.

Examples:
    >>> from reldate.periods.periodapi import new_period, require_period
    >>> pivot = pd.Timestamp("2020-08-11 00:02:01")
    >>> p, ok = new_period(pivot, "prev week")
    >>> str(p)
    '2020-08-03 00:00:00 — 2020-08-09 23:59:59'
    >>> str(require_period(pivot, "this month"))
    '2020-08-01 00:00:00 — 2020-08-31 23:59:59'
"""

from __future__ import annotations
import logging
import threading
from typing import Any

from reldate.periods.periodregistry import new_period_registry
from reldate.periods.periodvalue import Period
from reldate.times.timeapi import default_week_start
from reldate.times.timeregistry import new_nonblocking_time_registry

logger = logging.getLogger(__name__)

_default_registry = None
_default_lock = threading.Lock()


def get_default_period_registry():
    """Return the process-wide period registry, building it on first use."""
    global _default_registry
    registry = _default_registry
    if registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = new_period_registry(
                    time_registry=new_nonblocking_time_registry(week_start=default_week_start())
                )
            registry = _default_registry
    return registry


def set_default_period_registry(registry) -> None:
    """
    Replace the process-wide period registry.

    Every later call to ``new_period`` / ``require_period`` uses it.
    """
    global _default_registry
    if registry is None:
        raise ValueError("default period registry must not be None; use reset_default_period_registry()")
    with _default_lock:
        _default_registry = registry
    logger.info(f"Default period registry replaced with {registry!r}")


def reset_default_period_registry() -> None:
    """Drop the process-wide period registry; the next call rebuilds it."""
    global _default_registry
    with _default_lock:
        _default_registry = None


def new_period(pivot: Any, shortcut: str) -> tuple[Period, bool]:
    """
    Resolve a period shortcut with the default registry.

    Returns:
        (Period, True), or (Period(), False) when the shortcut is unknown
    """
    return get_default_period_registry().make(pivot, shortcut)


def require_period(pivot: Any, shortcut: str) -> Period:
    """Resolve a period shortcut with the default registry, Period() when unknown."""
    return get_default_period_registry().require(pivot, shortcut)


__all__ = [
    "get_default_period_registry",
    "set_default_period_registry",
    "reset_default_period_registry",
    "new_period",
    "require_period",
]
