"""Time Registry
-------------

Shortcut-to-rule lookup for time boundaries.

Two flavours share one implementation:
  - ``TimeRegistry``: plain dict lookups, no locking. Safe for concurrent
    lookups only when every ``extend`` / ``set_*`` call happens before them
    (e.g. during application start-up).
  - ``GuardedTimeRegistry``: wraps a ``TimeRegistry`` with a readers-writer
    lock so lookups run in parallel and mutations are exclusive. This is what
    ``new_time_registry()`` returns.

A missing shortcut is never an error: ``make`` returns ``(Time(), False)``
and ``require`` returns ``Time()``.

Examples:
  >>> registry = new_time_registry()
  >>> t, ok = registry.make(pd.Timestamp("2020-08-11 00:02:01"), "start prev week")
  >>> ok, str(t)
  (True, '2020-08-03 00:00:00')

  >>> registry.make(pd.Timestamp("2020-08-11"), "start next week")
  (Time(time=NaT, formatter=None), False)
"""

from __future__ import annotations
import logging
from typing import Any, Iterable, Optional, Union

from reldate.times.timerules import DEFAULT_TIME_RULES, TimeRule, week_rules
from reldate.times.timeshortcuts import WeekStart, normalize_week_start
from reldate.times.timevalue import DEFAULT_TIME_FORMATTER, Time, TimeFormatterLike
from reldate.utils.calendar import to_pivot
from reldate.utils.locking import ReadWriteLock
from reldate.utils.suggest import closest_shortcuts

logger = logging.getLogger(__name__)


class TimeRegistry:
    """
    Unsynchronised map from time shortcut to rule.

    A new registry holds all built-in rules (weeks start on Monday unless
    ``week_start`` says otherwise) and the default formatter.

    Args:
        week_start: WeekStart member or "monday" / "sunday" (default: Monday)
        formatter: Formatter snapshotted into every Time this registry makes;
            None makes values render as empty text
    """

    def __init__(
        self,
        *,
        week_start: Union[WeekStart, str] = WeekStart.MONDAY,
        formatter: Optional[TimeFormatterLike] = DEFAULT_TIME_FORMATTER,
    ):
        self._rules: dict[str, TimeRule] = {}
        self._formatter = formatter
        self._week_start = WeekStart.MONDAY

        self.extend(DEFAULT_TIME_RULES)
        self.set_week_start(week_start)

    # ---- Lookups ----

    def make(self, pivot: Any, shortcut: str) -> tuple[Time, bool]:
        """
        Resolve a shortcut against a pivot.

        Args:
            pivot: Timestamp-like reference instant
            shortcut: Time shortcut, e.g. "end this month"

        Returns:
            (Time, True) when the shortcut is registered, else (Time(), False)

        Raises:
            TypeError: If the shortcut is registered but pivot is not
                timestamp-like
        """
        rule = self._rules.get(shortcut)
        if rule is None:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(
                    f"Time shortcut {shortcut!r} not found; "
                    f"closest: {self.suggest(shortcut)}"
                )
            return Time(), False

        return Time(rule.calculate(to_pivot(pivot)), self._formatter), True

    resolve = make

    def require(self, pivot: Any, shortcut: str) -> Time:
        """Like ``make`` but drops the flag; returns Time() on a miss."""
        t, _ = self.make(pivot, shortcut)
        return t

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
    def formatter(self) -> Optional[TimeFormatterLike]:
        return self._formatter

    @property
    def week_start(self) -> WeekStart:
        return self._week_start

    # ---- Mutations ----

    def extend(self, rules: Iterable[TimeRule]) -> None:
        """
        Add rules, replacing any registered under the same shortcut.

        Rules are applied in order, so when two rules in ``rules`` share a
        shortcut the later one wins.
        """
        for rule in rules:
            self._rules[rule.shortcut()] = rule

    def set_formatter(self, formatter: Optional[TimeFormatterLike]) -> None:
        """Use formatter for every Time made from now on (None: empty text)."""
        self._formatter = formatter

    def set_week_start(self, week_start: Union[WeekStart, str]) -> None:
        """
        Re-register the four week shortcuts for the given first weekday.

        No other shortcut is touched. Calling it again with the same mode is
        a no-op in effect.

        Raises:
            ValueError: If week_start names no known mode
        """
        mode = normalize_week_start(week_start)
        self.extend(week_rules(mode))
        self._week_start = mode

    def copy(self) -> "TimeRegistry":
        """Independent registry with the same rules, formatter and week start."""
        clone = TimeRegistry.__new__(TimeRegistry)
        clone._rules = dict(self._rules)
        clone._formatter = self._formatter
        clone._week_start = self._week_start
        return clone

    def __repr__(self) -> str:
        return (
            f"TimeRegistry(rules={len(self._rules)}, "
            f"week_start={self._week_start.value!r})"
        )


class GuardedTimeRegistry:
    """
    Thread-safe wrapper around a TimeRegistry.

    Lookups take the shared side of a readers-writer lock, mutations the
    exclusive side. Rules and formatters are called while the shared lock is
    held, so they must not mutate this same registry.

    Args:
        registry: Registry to guard (default: a new TimeRegistry)
    """

    def __init__(self, registry: Optional[TimeRegistry] = None):
        self._registry = registry if registry is not None else TimeRegistry()
        self._lock = ReadWriteLock()

    def make(self, pivot: Any, shortcut: str) -> tuple[Time, bool]:
        with self._lock.read():
            return self._registry.make(pivot, shortcut)

    resolve = make

    def require(self, pivot: Any, shortcut: str) -> Time:
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
    def formatter(self) -> Optional[TimeFormatterLike]:
        with self._lock.read():
            return self._registry.formatter

    @property
    def week_start(self) -> WeekStart:
        with self._lock.read():
            return self._registry.week_start

    def extend(self, rules: Iterable[TimeRule]) -> None:
        rules = list(rules)
        with self._lock.write():
            self._registry.extend(rules)

    def set_formatter(self, formatter: Optional[TimeFormatterLike]) -> None:
        with self._lock.write():
            self._registry.set_formatter(formatter)

    def set_week_start(self, week_start: Union[WeekStart, str]) -> None:
        with self._lock.write():
            self._registry.set_week_start(week_start)

    def copy(self) -> "GuardedTimeRegistry":
        """Independent guarded registry with its own lock and rule map."""
        with self._lock.read():
            return GuardedTimeRegistry(self._registry.copy())

    def __repr__(self) -> str:
        return f"Guarded{self._registry!r}"


def new_time_registry(
    *,
    week_start: Union[WeekStart, str] = WeekStart.MONDAY,
    formatter: Optional[TimeFormatterLike] = DEFAULT_TIME_FORMATTER,
) -> GuardedTimeRegistry:
    """
    Create a time registry that is safe to extend while other threads read it.

    Example:
        >>> registry = new_time_registry(week_start="sunday")
        >>> registry.require(pd.Timestamp("2020-07-08"), "start this week").time
        Timestamp('2020-07-05 00:00:00')
    """
    registry = GuardedTimeRegistry(TimeRegistry(week_start=week_start, formatter=formatter))
    logger.debug(f"Created {registry!r}")
    return registry


def new_nonblocking_time_registry(
    *,
    week_start: Union[WeekStart, str] = WeekStart.MONDAY,
    formatter: Optional[TimeFormatterLike] = DEFAULT_TIME_FORMATTER,
) -> TimeRegistry:
    """
    Create a time registry without any locking.

    Lookups never block, but ``extend`` and the ``set_*`` methods must all
    happen before the registry is shared between threads.
    """
    registry = TimeRegistry(week_start=week_start, formatter=formatter)
    logger.debug(f"Created {registry!r}")
    return registry


__all__ = [
    "TimeRegistry",
    "GuardedTimeRegistry",
    "new_time_registry",
    "new_nonblocking_time_registry",
]
