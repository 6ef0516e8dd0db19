"""Time module for shortcut-based time boundaries.

This module resolves shortcuts such as "start prev week" or "end this quart"
against a pivot instant.

Public API:
    new_time(pivot, shortcut) -> (Time, bool)
        Resolve with the default registry

    require_time(pivot, shortcut) -> Time
        Resolve with the default registry, Time() when unknown

    new_time_registry(week_start="monday") -> GuardedTimeRegistry
        Independent, extendable registry safe for concurrent use

Examples:
    >>> from reldate.times import new_time, new_time_registry
    >>> import pandas as pd
    >>>
    >>> pivot = pd.Timestamp("2019-12-11 00:02:01", tz="UTC")
    >>> t, ok = new_time(pivot, "end this month")
    >>> t.time
    Timestamp('2019-12-31 23:59:59.999999999+0000', tz='UTC')
    >>>
    >>> # Sunday-first weeks
    >>> registry = new_time_registry(week_start="sunday")
    >>> str(registry.require(pd.Timestamp("2020-07-08"), "start this week"))
    '2020-07-05 00:00:00'
"""

from reldate.times.timeshortcuts import (
    TIME_AS_IS,
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
    TIME_SHORTCUTS,
    WEEK_SHORTCUTS,
    WeekStart,
    normalize_week_start,
)
from reldate.times.timerules import (
    TimeRule,
    CalendarRule,
    DEFAULT_TIME_RULES,
    MONDAY_WEEK_RULES,
    SUNDAY_WEEK_RULES,
    week_rules,
)
from reldate.times.timevalue import (
    Time,
    TimeFormatter,
    DefaultTimeFormatter,
    DEFAULT_TIME_FORMATTER,
)
from reldate.times.timeregistry import (
    TimeRegistry,
    GuardedTimeRegistry,
    new_time_registry,
    new_nonblocking_time_registry,
)
from reldate.times.timeapi import (
    new_time,
    require_time,
    get_default_time_registry,
    set_default_time_registry,
    reset_default_time_registry,
    set_default_week_start,
)

__all__ = [
    "TIME_AS_IS",
    "TIME_START_OF_THIS_DAY",
    "TIME_END_OF_THIS_DAY",
    "TIME_START_OF_THIS_WEEK",
    "TIME_END_OF_THIS_WEEK",
    "TIME_START_OF_THIS_MONTH",
    "TIME_END_OF_THIS_MONTH",
    "TIME_START_OF_THIS_QUART",
    "TIME_END_OF_THIS_QUART",
    "TIME_START_OF_THIS_HALF_YEAR",
    "TIME_END_OF_THIS_HALF_YEAR",
    "TIME_START_OF_THIS_YEAR",
    "TIME_END_OF_THIS_YEAR",
    "TIME_START_OF_PREV_DAY",
    "TIME_END_OF_PREV_DAY",
    "TIME_START_OF_PREV_WEEK",
    "TIME_END_OF_PREV_WEEK",
    "TIME_START_OF_PREV_MONTH",
    "TIME_END_OF_PREV_MONTH",
    "TIME_START_OF_PREV_QUART",
    "TIME_END_OF_PREV_QUART",
    "TIME_START_OF_PREV_HALF_YEAR",
    "TIME_END_OF_PREV_HALF_YEAR",
    "TIME_START_OF_PREV_YEAR",
    "TIME_END_OF_PREV_YEAR",
    "TIME_SHORTCUTS",
    "WEEK_SHORTCUTS",
    "WeekStart",
    "normalize_week_start",
    "TimeRule",
    "CalendarRule",
    "DEFAULT_TIME_RULES",
    "MONDAY_WEEK_RULES",
    "SUNDAY_WEEK_RULES",
    "week_rules",
    "Time",
    "TimeFormatter",
    "DefaultTimeFormatter",
    "DEFAULT_TIME_FORMATTER",
    "TimeRegistry",
    "GuardedTimeRegistry",
    "new_time_registry",
    "new_nonblocking_time_registry",
    "new_time",
    "require_time",
    "get_default_time_registry",
    "set_default_time_registry",
    "reset_default_time_registry",
    "set_default_week_start",
]
