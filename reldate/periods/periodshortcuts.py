"""Period shortcut names.

Period shortcuts live in their own namespace: "prev week" names a period,
while "start prev week" names a time boundary.
"""

PERIOD_THIS_DAY = "this day"
PERIOD_THIS_WEEK = "this week"
PERIOD_THIS_MONTH = "this month"
PERIOD_THIS_QUART = "this quart"
PERIOD_THIS_HALF_YEAR = "this half year"
PERIOD_THIS_YEAR = "this year"
PERIOD_PREV_DAY = "prev day"
PERIOD_PREV_WEEK = "prev week"
PERIOD_PREV_MONTH = "prev month"
PERIOD_PREV_QUART = "prev quart"
PERIOD_PREV_HALF_YEAR = "prev half year"
PERIOD_PREV_YEAR = "prev year"

PERIOD_SHORTCUTS = (
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
]
