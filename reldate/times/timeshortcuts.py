"""Time shortcut names and week-start modes.

Shortcuts are plain, case-sensitive strings. The constants below name the
built-in set; registries accept any other string added through ``extend``.
"""

from __future__ import annotations
from enum import Enum
from typing import Union


TIME_AS_IS = "as is"
TIME_START_OF_THIS_DAY = "start this day"
TIME_END_OF_THIS_DAY = "end this day"
TIME_START_OF_THIS_WEEK = "start this week"
TIME_END_OF_THIS_WEEK = "end this week"
TIME_START_OF_THIS_MONTH = "start this month"
TIME_END_OF_THIS_MONTH = "end this month"
TIME_START_OF_THIS_QUART = "start this quart"
TIME_END_OF_THIS_QUART = "end this quart"
TIME_START_OF_THIS_HALF_YEAR = "start this half year"
TIME_END_OF_THIS_HALF_YEAR = "end this half year"
TIME_START_OF_THIS_YEAR = "start this year"
TIME_END_OF_THIS_YEAR = "end this year"
TIME_START_OF_PREV_DAY = "start prev day"
TIME_END_OF_PREV_DAY = "end prev day"
TIME_START_OF_PREV_WEEK = "start prev week"
TIME_END_OF_PREV_WEEK = "end prev week"
TIME_START_OF_PREV_MONTH = "start prev month"
TIME_END_OF_PREV_MONTH = "end prev month"
TIME_START_OF_PREV_QUART = "start prev quart"
TIME_END_OF_PREV_QUART = "end prev quart"
TIME_START_OF_PREV_HALF_YEAR = "start prev half year"
TIME_END_OF_PREV_HALF_YEAR = "end prev half year"
TIME_START_OF_PREV_YEAR = "start prev year"
TIME_END_OF_PREV_YEAR = "end prev year"

# All built-in time shortcuts, in registration order
TIME_SHORTCUTS = (
    TIME_AS_IS,
    TIME_START_OF_THIS_DAY,
    TIME_END_OF_THIS_DAY,
    TIME_START_OF_PREV_DAY,
    TIME_END_OF_PREV_DAY,
    TIME_START_OF_THIS_WEEK,
    TIME_END_OF_THIS_WEEK,
    TIME_START_OF_PREV_WEEK,
    TIME_END_OF_PREV_WEEK,
    TIME_START_OF_THIS_MONTH,
    TIME_END_OF_THIS_MONTH,
    TIME_START_OF_PREV_MONTH,
    TIME_END_OF_PREV_MONTH,
    TIME_START_OF_THIS_QUART,
    TIME_END_OF_THIS_QUART,
    TIME_START_OF_PREV_QUART,
    TIME_END_OF_PREV_QUART,
    TIME_START_OF_THIS_HALF_YEAR,
    TIME_END_OF_THIS_HALF_YEAR,
    TIME_START_OF_PREV_HALF_YEAR,
    TIME_END_OF_PREV_HALF_YEAR,
    TIME_START_OF_THIS_YEAR,
    TIME_END_OF_THIS_YEAR,
    TIME_START_OF_PREV_YEAR,
    TIME_END_OF_PREV_YEAR,
)

# Shortcuts whose rule depends on the week-start mode
WEEK_SHORTCUTS = (
    TIME_START_OF_THIS_WEEK,
    TIME_END_OF_THIS_WEEK,
    TIME_START_OF_PREV_WEEK,
    TIME_END_OF_PREV_WEEK,
)


class WeekStart(str, Enum):
    """First day of the week used by the week rules."""

    MONDAY = "monday"
    SUNDAY = "sunday"


def normalize_week_start(value: Union[WeekStart, str]) -> WeekStart:
    """
    Turn a WeekStart or its name into a WeekStart.

    Names are matched after stripping and lowercasing, so "Sunday" and
    " SUNDAY " both work.

    Args:
        value: WeekStart member or "monday" / "sunday"

    Returns:
        WeekStart member

    Raises:
        ValueError: If value names no known week start

    Examples:
        >>> normalize_week_start("Sunday")
        <WeekStart.SUNDAY: 'sunday'>
    """
    if isinstance(value, WeekStart):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for mode in WeekStart:
            if mode.value == key:
                return mode
    raise ValueError(
        f"Unknown week start {value!r}; expected one of: "
        + ", ".join(mode.value for mode in WeekStart)
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
]
