"""reldate - Relative Date Boundaries

Public API for resolving shortcuts like "prev week" or "end this quart" into
concrete instants relative to a pivot timestamp. Handy for reports.

Usage:
    import pandas as pd
    from reldate import new_time, require_period, new_period_registry

    pivot = pd.Timestamp("2020-08-11 00:02:01", tz="UTC")

    # One boundary
    t, ok = new_time(pivot, "start prev week")   # 2020-08-03 00:00:00

    # A named range
    p = require_period(pivot, "prev quart")      # 2020-04-01 00:00:00 — 2020-06-30 23:59:59

    # Custom rules on an independent registry
    registry = new_period_registry()
    registry.extend([MyPrevDecadeRule()])

Unknown shortcuts never raise: ``new_*`` returns (zero value, False) and
``require_*`` returns the zero value.
"""

__version__ = "0.1.0"

# ============================================================================
# Time Resolution API
# ============================================================================
# Primary interface: reldate.times.timeapi
# Rules: reldate.times.timerules
# Registries: reldate.times.timeregistry

from .times.timeapi import (
    new_time,                      # Resolve with the default registry
    require_time,                  # Resolve, zero value on miss
    get_default_time_registry,     # Process-wide registry (built lazily)
    set_default_time_registry,     # Replace the process-wide registry
    reset_default_time_registry,   # Drop it so the next call rebuilds it
    set_default_week_start,        # Monday or Sunday for the default registry
)

from .times.timeregistry import (
    TimeRegistry,                  # Unlocked registry
    GuardedTimeRegistry,           # Readers-writer locked registry
    new_time_registry,             # Guarded registry with default rules
    new_nonblocking_time_registry, # Unlocked registry with default rules
)

from .times.timerules import (
    TimeRule,                      # Rule protocol: calculate(pivot), shortcut()
    CalendarRule,                  # Rule backed by a plain function
)

from .times.timevalue import (
    Time,                          # Resolved instant + formatter snapshot
    TimeFormatter,                 # Formatter protocol: format(instant)
    DEFAULT_TIME_FORMATTER,        # "YYYY-MM-DD HH:MM:SS"
)

from .times.timeshortcuts import (
    WeekStart,
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
)

# ============================================================================
# Period Resolution API
# ============================================================================
# Primary interface: reldate.periods.periodapi

from .periods.periodapi import (
    new_period,                      # Resolve with the default registry
    require_period,                  # Resolve, zero value on miss
    get_default_period_registry,     # Process-wide registry (built lazily)
    set_default_period_registry,     # Replace the process-wide registry
    reset_default_period_registry,   # Drop it so the next call rebuilds it
)

from .periods.periodregistry import (
    PeriodRegistry,                  # Unlocked registry
    GuardedPeriodRegistry,           # Readers-writer locked registry
    new_period_registry,             # Guarded registry with default rules
    new_nonblocking_period_registry, # Unlocked registry with default rules
)

from .periods.periodrules import (
    PeriodRule,                      # Rule protocol: calculate(pivot, time_registry), shortcut()
    BoundaryPairRule,                # Period made of two time shortcuts
)

from .periods.periodvalue import (
    Period,                          # Resolved range + formatter snapshot
    PeriodFormatter,                 # Formatter protocol: format(from, to, shortcut)
    DEFAULT_PERIOD_FORMATTER,        # "<from> — <to>"
)

from .periods.periodshortcuts import (
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

__all__ = [
    # Version
    "__version__",

    # ========================================================================
    # PRIMARY APIS - Start here!
    # ========================================================================
    "new_time",          # Resolve a time shortcut
    "require_time",      # Resolve a time shortcut, zero value on miss
    "new_period",        # Resolve a period shortcut
    "require_period",    # Resolve a period shortcut, zero value on miss

    # ========================================================================
    # Time Resolution
    # ========================================================================
    "get_default_time_registry",
    "set_default_time_registry",
    "reset_default_time_registry",
    "set_default_week_start",
    "TimeRegistry",
    "GuardedTimeRegistry",
    "new_time_registry",
    "new_nonblocking_time_registry",
    "TimeRule",
    "CalendarRule",
    "Time",
    "TimeFormatter",
    "DEFAULT_TIME_FORMATTER",
    "WeekStart",
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

    # ========================================================================
    # Period Resolution
    # ========================================================================
    "get_default_period_registry",
    "set_default_period_registry",
    "reset_default_period_registry",
    "PeriodRegistry",
    "GuardedPeriodRegistry",
    "new_period_registry",
    "new_nonblocking_period_registry",
    "PeriodRule",
    "BoundaryPairRule",
    "Period",
    "PeriodFormatter",
    "DEFAULT_PERIOD_FORMATTER",
    "PERIOD_THIS_DAY",
    "PERIOD_THIS_WEEK",
    "PERIOD_THIS_MONTH",
    "PERIOD_THIS_QUART",
    "PERIOD_THIS_HALF_YEAR",
    "PERIOD_THIS_YEAR",
    "PERIOD_PREV_DAY",
    "PERIOD_PREV_WEEK",
    "PERIOD_PREV_MONTH",
    "PERIOD_PREV_QUART",
    "PERIOD_PREV_HALF_YEAR",
    "PERIOD_PREV_YEAR",
]
