"""Period Rules
------------

A period rule turns a pivot into a (from, to) pair of Time values. The
built-in rules do no arithmetic of their own: each one asks the time
registry for two boundaries, e.g. "prev week" is
"start prev week" .. "end prev week".

Boundaries are fetched with ``require``, so a time registry that lacks one of
them yields a zero Time on that side instead of an error. Rules registered by
callers are expected to name time shortcuts the registry actually has.

Example:
  >>> rule = BoundaryPairRule("last year", "start prev year", "end prev year")
  >>> from_time, to_time = rule.calculate(pd.Timestamp("1998-03-01"), TimeRegistry())
  >>> str(from_time), str(to_time)
  ('1997-01-01 00:00:00', '1997-12-31 23:59:59')
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import pandas as pd

from reldate.periods.periodshortcuts import (
    PERIOD_THIS_DAY,
    PERIOD_THIS_WEEK,
    PERIOD_THIS_MONTH,
    PERIOD_THIS_QUART,
    PERIOD_THIS_HALF_YEAR,
    PERIOD_THIS_YEAR,
    PERIOD_PREV_DAY,
    PERIOD_PREV_WEEK,
    PERIOD_PREV_MONTH,
    PERIOD_PREV_QUART,
    PERIOD_PREV_HALF_YEAR,
    PERIOD_PREV_YEAR,
)
from reldate.times.timeshortcuts import (
    TIME_START_OF_THIS_DAY,
    TIME_END_OF_THIS_DAY,
    TIME_START_OF_THIS_WEEK,
    TIME_END_OF_THIS_WEEK,
    TIME_START_OF_THIS_MONTH,
    TIME_END_OF_THIS_MONTH,
    TIME_START_OF_THIS_QUART,
    TIME_END_OF_THIS_QUART,
    TIME_START_OF_THIS_HALF_YEAR,
    TIME_END_OF_THIS_HALF_YEAR,
    TIME_START_OF_THIS_YEAR,
    TIME_END_OF_THIS_YEAR,
    TIME_START_OF_PREV_DAY,
    TIME_END_OF_PREV_DAY,
    TIME_START_OF_PREV_WEEK,
    TIME_END_OF_PREV_WEEK,
    TIME_START_OF_PREV_MONTH,
    TIME_END_OF_PREV_MONTH,
    TIME_START_OF_PREV_QUART,
    TIME_END_OF_PREV_QUART,
    TIME_START_OF_PREV_HALF_YEAR,
    TIME_END_OF_PREV_HALF_YEAR,
    TIME_START_OF_PREV_YEAR,
    TIME_END_OF_PREV_YEAR,
)
from reldate.times.timevalue import Time


@runtime_checkable
class PeriodRule(Protocol):
    """Anything that computes a (from, to) pair from a pivot and a time registry."""

    def calculate(self, pivot: pd.Timestamp, time_registry) -> tuple[Time, Time]: ...

    def shortcut(self) -> str: ...


@dataclass(frozen=True)
class BoundaryPairRule:
    """
    Period made of two time shortcuts resolved against the same pivot.

    Args:
        name: Period shortcut the rule answers to
        from_shortcut: Time shortcut of the first instant
        to_shortcut: Time shortcut of the last instant
    """

    name: str
    from_shortcut: str
    to_shortcut: str

    def calculate(self, pivot: pd.Timestamp, time_registry) -> tuple[Time, Time]:
        return (
            time_registry.require(pivot, self.from_shortcut),
            time_registry.require(pivot, self.to_shortcut),
        )

    def shortcut(self) -> str:
        return self.name


DEFAULT_PERIOD_RULES = (
    BoundaryPairRule(PERIOD_THIS_DAY, TIME_START_OF_THIS_DAY, TIME_END_OF_THIS_DAY),
    BoundaryPairRule(PERIOD_THIS_WEEK, TIME_START_OF_THIS_WEEK, TIME_END_OF_THIS_WEEK),
    BoundaryPairRule(PERIOD_THIS_MONTH, TIME_START_OF_THIS_MONTH, TIME_END_OF_THIS_MONTH),
    BoundaryPairRule(PERIOD_THIS_QUART, TIME_START_OF_THIS_QUART, TIME_END_OF_THIS_QUART),
    BoundaryPairRule(PERIOD_THIS_HALF_YEAR, TIME_START_OF_THIS_HALF_YEAR, TIME_END_OF_THIS_HALF_YEAR),
    BoundaryPairRule(PERIOD_THIS_YEAR, TIME_START_OF_THIS_YEAR, TIME_END_OF_THIS_YEAR),
    BoundaryPairRule(PERIOD_PREV_DAY, TIME_START_OF_PREV_DAY, TIME_END_OF_PREV_DAY),
    BoundaryPairRule(PERIOD_PREV_WEEK, TIME_START_OF_PREV_WEEK, TIME_END_OF_PREV_WEEK),
    BoundaryPairRule(PERIOD_PREV_MONTH, TIME_START_OF_PREV_MONTH, TIME_END_OF_PREV_MONTH),
    BoundaryPairRule(PERIOD_PREV_QUART, TIME_START_OF_PREV_QUART, TIME_END_OF_PREV_QUART),
    BoundaryPairRule(PERIOD_PREV_HALF_YEAR, TIME_START_OF_PREV_HALF_YEAR, TIME_END_OF_PREV_HALF_YEAR),
    BoundaryPairRule(PERIOD_PREV_YEAR, TIME_START_OF_PREV_YEAR, TIME_END_OF_PREV_YEAR),
)


__all__ = [
    "PeriodRule",
    "BoundaryPairRule",
    "DEFAULT_PERIOD_RULES",
]
