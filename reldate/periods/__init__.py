"""Period module for shortcut-based date ranges.

This module resolves period shortcuts such as "prev week" or "this quart"
into (from, to) Time pairs.

Public API:
    new_period(pivot, shortcut) -> (Period, bool)
        Resolve with the default registry

    require_period(pivot, shortcut) -> Period
        Resolve with the default registry, Period() when unknown

    new_period_registry(time_registry=None) -> GuardedPeriodRegistry
        Independent, extendable registry safe for concurrent use

Examples:
    >>> from reldate.periods import require_period
    >>> import pandas as pd
    >>>
    >>> p = require_period(pd.Timestamp("2020-08-11", tz="UTC"), "prev quart")
    >>> p.from_time.time, p.to_time.time
    (Timestamp('2020-04-01 00:00:00+0000', tz='UTC'),
     Timestamp('2020-06-30 23:59:59.999999999+0000', tz='UTC'))
"""

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
    PERIOD_SHORTCUTS,
)
from reldate.periods.periodrules import (
    PeriodRule,
    BoundaryPairRule,
    DEFAULT_PERIOD_RULES,
)
from reldate.periods.periodvalue import (
    Period,
    PeriodFormatter,
    DefaultPeriodFormatter,
    DEFAULT_PERIOD_FORMATTER,
)
from reldate.periods.periodregistry import (
    PeriodRegistry,
    GuardedPeriodRegistry,
    new_period_registry,
    new_nonblocking_period_registry,
)
from reldate.periods.periodapi import (
    new_period,
    require_period,
    get_default_period_registry,
    set_default_period_registry,
    reset_default_period_registry,
)

__all__ = [
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
    "PERIOD_SHORTCUTS",
    "PeriodRule",
    "BoundaryPairRule",
    "DEFAULT_PERIOD_RULES",
    "Period",
    "PeriodFormatter",
    "DefaultPeriodFormatter",
    "DEFAULT_PERIOD_FORMATTER",
    "PeriodRegistry",
    "GuardedPeriodRegistry",
    "new_period_registry",
    "new_nonblocking_period_registry",
    "new_period",
    "require_period",
    "get_default_period_registry",
    "set_default_period_registry",
    "reset_default_period_registry",
]
