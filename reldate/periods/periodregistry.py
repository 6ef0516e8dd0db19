"""Period Registry
---------------

Shortcut-to-rule lookup for named date ranges. Mirrors the time registry one
level up: rules get the pivot plus a time registry and return two Time
values, which the registry wraps in a Period with its current formatter.

  - ``PeriodRegistry``: no locking; mutate before sharing between threads.
  - ``GuardedPeriodRegistry``: readers-writer locked wrapper, returned by
    ``new_period_registry()``.

Examples:
  >>> registry = new_period_registry()
  >>> p, ok = registry.make(pd.Timestamp("2020-08-11 00:02:01"), "prev week")
  >>> str(p)
  '2020-08-03 00:00:00 — 2020-08-09 23:59:59'
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, Optional

from reldate.periods.periodrules import DEFAULT_PERIOD_RULES, PeriodRule
from reldate.periods.periodvalue import DEFAULT_PERIOD_FORMATTER, Period, PeriodFormatterLike
from reldate.times.timeregistry import TimeRegistry
from reldate.utils.calendar import to_pivot
from reldate.utils.locking import ReadWriteLock
from reldate.utils.suggest import closest_shortcuts

logger = logging.getLogger(__name__)


class PeriodRegistry:
    """
    Unsynchronised map from period shortcut to rule.

    Args:
        time_registry: Registry the rules resolve boundaries against
            (default: a new unguarded TimeRegistry owned by this registry)
        formatter: Formatter snapshotted into every Period this registry
            makes; None makes values render as empty text
    """

    def __init__(
        self,
        *,
        time_registry=None,
        formatter: Optional[PeriodFormatterLike] = DEFAULT_PERIOD_FORMATTER,
    ):
        self._rules: dict[str, PeriodRule] = {}
        self._time_registry = time_registry if time_registry is not None else TimeRegistry()
        self._formatter = formatter

        self.extend(DEFAULT_PERIOD_RULES)

    # ---- Lookups ----

    def make(self, pivot: Any, shortcut: str) -> tuple[Period, bool]:
        """
        Resolve a period shortcut against a pivot.

        Args:
            pivot: Timestamp-like reference instant
            shortcut: Period shortcut, e.g. "prev quart"

        Returns:
            (Period, True) when the shortcut is registered, else (Period(), False)

        Raises:
            TypeError: If the shortcut is registered but pivot is not
                timestamp-like
        """
        rule = self._rules.get(shortcut)
        if rule is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"Period shortcut {shortcut!r} not found; "
                    f"closest: {self.suggest(shortcut)}"
                )
            return Period(), False

        from_time, to_time = rule.calculate(to_pivot(pivot), self._time_registry)
        return Period(from_time, to_time, shortcut, self._formatter), True

    resolve = make

    def require(self, pivot: Any, shortcut: str) -> Period:
        """Like ``make`` but drops the flag; returns Period() on a miss."""
        p, _ = self.make(pivot, shortcut)
        return p

    def suggest(self, shortcut: str, limit: int = 3) -> list[str]:
        """Registered shortcuts closest to the given one."""
        return closest_shortcuts(shortcut, self._rules.keys(), limit=limit)

    def shortcuts(self) -> list[str]:
        """Registered shortcuts in registration order."""
        return list(self._rules)

    def __contains__(self, shortcut: object) -> bool:
        return shortcut in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    @property
    def formatter(self) -> Optional[PeriodFormatterLike]:
        return self._formatter

    @property
    def time_registry(self):
        return self._time_registry

    # ---- Mutations ----

    def extend(self, rules: Iterable[PeriodRule]) -> None:
        """Add rules, replacing any registered under the same shortcut."""
        for rule in rules:
            self._rules[rule.shortcut()] = rule

    def set_formatter(self, formatter: Optional[PeriodFormatterLike]) -> None:
        """Use formatter for every Period made from now on (None: empty text)."""
        self._formatter = formatter

    def set_time_registry(self, time_registry) -> None:
        """
        Resolve boundaries against another time registry from now on.

        Registered rules stay as they are; they simply receive the new
        registry on their next ``calculate`` call.
        """
        if time_registry is None:
            raise ValueError("time_registry must not be None")
        self._time_registry = time_registry

    def copy(self) -> "PeriodRegistry":
        """
        Independent registry with the same rules and formatter.

        The time registry is shared, not copied.
        """
        clone = PeriodRegistry.__new__(PeriodRegistry)
        clone._rules = dict(self._rules)
        clone._time_registry = self._time_registry
        clone._formatter = self._formatter
        return clone

    def __repr__(self) -> str:
        return f"PeriodRegistry(rules={len(self._rules)}, time_registry={self._time_registry!r})"


class GuardedPeriodRegistry:
    """
    Thread-safe wrapper around a PeriodRegistry.

    The lock only covers this registry's own state. The time registry it
    consults is locked (or not) on its own terms.

    Args:
        registry: Registry to guard (default: a new PeriodRegistry)
    """

    def __init__(self, registry: Optional[PeriodRegistry] = None):
        self._registry = registry if registry is not None else PeriodRegistry()
        self._lock = ReadWriteLock()

    def make(self, pivot: Any, shortcut: str) -> tuple[Period, bool]:
        with self._lock.read():
            return self._registry.make(pivot, shortcut)

    resolve = make

    def require(self, pivot: Any, shortcut: str) -> Period:
        with self._lock.read():
            return self._registry.require(pivot, shortcut)

    def suggest(self, shortcut: str, limit: int = 3) -> list[str]:
        with self._lock.read():
            return self._registry.suggest(shortcut, limit=limit)

    def shortcuts(self) -> list[str]:
        with self._lock.read():
            return self._registry.shortcuts()

    def __contains__(self, shortcut: object) -> bool:
        with self._lock.read():
            return shortcut in self._registry

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._registry)

    @property
    def formatter(self) -> Optional[PeriodFormatterLike]:
        with self._lock.read():
            return self._registry.formatter

    @property
    def time_registry(self):
        with self._lock.read():
            return self._registry.time_registry

    def extend(self, rules: Iterable[PeriodRule]) -> None:
        rules = list(rules)
        with self._lock.write():
            self._registry.extend(rules)

    def set_formatter(self, formatter: Optional[PeriodFormatterLike]) -> None:
        with self._lock.write():
            self._registry.set_formatter(formatter)

    def set_time_registry(self, time_registry) -> None:
        with self._lock.write():
            self._registry.set_time_registry(time_registry)

    def copy(self) -> "GuardedPeriodRegistry":
        with self._lock.read():
            return GuardedPeriodRegistry(self._registry.copy())

    def __repr__(self) -> str:
        return f"Guarded{self._registry!r}"


def new_period_registry(
    *,
    time_registry=None,
    formatter: Optional[PeriodFormatterLike] = DEFAULT_PERIOD_FORMATTER,
) -> GuardedPeriodRegistry:
    """
    Create a period registry that is safe to extend while other threads read it.

    Without ``time_registry`` it gets its own unguarded TimeRegistry, which
    is never mutated unless the caller reaches it through ``time_registry``.
    """
    registry = GuardedPeriodRegistry(
        PeriodRegistry(time_registry=time_registry, formatter=formatter)
    )
    logger.debug(f"Created {registry!r}")
    return registry


def new_nonblocking_period_registry(
    *,
    time_registry=None,
    formatter: Optional[PeriodFormatterLike] = DEFAULT_PERIOD_FORMATTER,
) -> PeriodRegistry:
    """Create a period registry without any locking."""
    registry = PeriodRegistry(time_registry=time_registry, formatter=formatter)
    logger.debug(f"Created {registry!r}")
    return registry


__all__ = [
    "PeriodRegistry",
    "GuardedPeriodRegistry",
    "new_period_registry",
    "new_nonblocking_period_registry",
]
