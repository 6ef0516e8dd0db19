"""Time Rules
----------

Calendar arithmetic for every built-in time shortcut.

Each boundary is a plain function ``f(pivot) -> Timestamp`` working on the
pivot's wall clock in the pivot's own zone; ``CalendarRule`` binds one of
them to its shortcut so a registry can look it up.

Boundaries:
  - Day: 00:00:00.000000000 .. 23:59:59.999999999
  - Week: Monday..Sunday (ISO, via isoweek) or Sunday..Saturday
  - Month / quarter / half-year / year: aligned to January 1
  - Every "end" is one nanosecond before the next period's "start"

The "prev" rules are not all shifted copies of the "this" rules:
  - "start prev X" derives X's start from the pivot moved back one X
  - "end prev X" is the day before this X's start, at 23:59:59.999999999
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Callable, Protocol, runtime_checkable

import pandas as pd

try:
    from isoweek import Week
except ImportError as e:
    raise ImportError("isoweek not installed. pip install isoweek") from e

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
    WeekStart,
    normalize_week_start,
)
from reldate.utils.calendar import (
    day_start,
    day_end,
    shift_days,
    shift_months,
    span_first_day,
    span_last_day,
)


QUART_MONTHS = 3
HALF_YEAR_MONTHS = 6


@runtime_checkable
class TimeRule(Protocol):
    """Anything that computes one boundary instant from a pivot."""

    def calculate(self, pivot: pd.Timestamp) -> pd.Timestamp: ...

    def shortcut(self) -> str: ...


@dataclass(frozen=True)
class CalendarRule:
    """
    A time rule backed by a plain boundary function.

    Args:
        name: Shortcut the rule answers to
        func: Boundary function ``f(pivot) -> Timestamp``

    Example:
        >>> rule = CalendarRule("my birthday this year",
        ...                     lambda p: day_start(date(p.year, 12, 13), p.tzinfo))
        >>> rule.calculate(pd.Timestamp("2004-03-01")).date()
        datetime.date(2004, 12, 13)
    """

    name: str
    func: Callable[[pd.Timestamp], pd.Timestamp]

    def calculate(self, pivot: pd.Timestamp) -> pd.Timestamp:
        return self.func(pivot)

    def shortcut(self) -> str:
        return self.name


# ---- As is ----

def as_is(pivot: pd.Timestamp) -> pd.Timestamp:
    """Return the pivot unchanged."""
    return pivot


# ---- Day ----

def start_of_this_day(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_start(pivot.date(), pivot.tzinfo)


def end_of_this_day(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_end(pivot.date(), pivot.tzinfo)


def start_of_prev_day(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_start(shift_days(pivot.date(), -1), pivot.tzinfo)


def end_of_prev_day(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_end(shift_days(pivot.date(), -1), pivot.tzinfo)


# ---- Week, Monday first ----

def _monday_of(day: date) -> date:
    # ISO weeks run Monday..Sunday, so a Sunday belongs to the week of the
    # Monday six days earlier
    return Week.withdate(day).monday()


def start_of_this_week(pivot: pd.Timestamp) -> pd.Timestamp:
    """
    Monday 00:00 of the pivot's week.

    Example:
        >>> start_of_this_week(pd.Timestamp("2020-08-09"))  # a Sunday
        Timestamp('2020-08-03 00:00:00')
    """
    return day_start(_monday_of(pivot.date()), pivot.tzinfo)


def end_of_this_week(pivot: pd.Timestamp) -> pd.Timestamp:
    """Sunday 23:59:59.999999999 of the pivot's week."""
    return day_end(Week.withdate(pivot.date()).sunday(), pivot.tzinfo)


def start_of_prev_week(pivot: pd.Timestamp) -> pd.Timestamp:
    """Monday 00:00 of the week containing the pivot moved back seven days."""
    return day_start(_monday_of(shift_days(pivot.date(), -7)), pivot.tzinfo)


def end_of_prev_week(pivot: pd.Timestamp) -> pd.Timestamp:
    """The day before this week's Monday, at 23:59:59.999999999."""
    return day_end(shift_days(_monday_of(pivot.date()), -1), pivot.tzinfo)


# ---- Week, Sunday first ----

def _days_since_sunday(day: date) -> int:
    # Sunday=0 .. Saturday=6
    return day.isoweekday() % 7


def start_of_this_week_sunday(pivot: pd.Timestamp) -> pd.Timestamp:
    """
    Sunday 00:00 of the pivot's week.

    Example:
        >>> start_of_this_week_sunday(pd.Timestamp("2020-07-08"))
        Timestamp('2020-07-05 00:00:00')
    """
    day = pivot.date()
    return day_start(shift_days(day, -_days_since_sunday(day)), pivot.tzinfo)


def end_of_this_week_sunday(pivot: pd.Timestamp) -> pd.Timestamp:
    """Saturday 23:59:59.999999999 of the pivot's week."""
    day = pivot.date()
    return day_end(shift_days(day, 6 - _days_since_sunday(day)), pivot.tzinfo)


def start_of_prev_week_sunday(pivot: pd.Timestamp) -> pd.Timestamp:
    shifted = shift_days(pivot.date(), -7)
    return day_start(shift_days(shifted, -_days_since_sunday(shifted)), pivot.tzinfo)


def end_of_prev_week_sunday(pivot: pd.Timestamp) -> pd.Timestamp:
    day = pivot.date()
    return day_end(shift_days(day, -_days_since_sunday(day) - 1), pivot.tzinfo)


# ---- Month ----

def start_of_this_month(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_start(span_first_day(pivot.date(), 1), pivot.tzinfo)


def end_of_this_month(pivot: pd.Timestamp) -> pd.Timestamp:
    """
    Last calendar day of the pivot's month, at 23:59:59.999999999.

    Example:
        >>> end_of_this_month(pd.Timestamp("2024-02-10"))
        Timestamp('2024-02-29 23:59:59.999999999')
    """
    return day_end(span_last_day(pivot.date(), 1), pivot.tzinfo)


def start_of_prev_month(pivot: pd.Timestamp) -> pd.Timestamp:
    shifted = shift_months(pivot.date(), -1)
    return day_start(span_first_day(shifted, 1), pivot.tzinfo)


def end_of_prev_month(pivot: pd.Timestamp) -> pd.Timestamp:
    first = span_first_day(pivot.date(), 1)
    return day_end(shift_days(first, -1), pivot.tzinfo)


# ---- Quarter ----

def start_of_this_quart(pivot: pd.Timestamp) -> pd.Timestamp:
    """
    First day of the pivot's quarter (Jan, Apr, Jul or Oct 1) at 00:00.

    Example:
        >>> start_of_this_quart(pd.Timestamp("2019-07-11"))
        Timestamp('2019-07-01 00:00:00')
    """
    return day_start(span_first_day(pivot.date(), QUART_MONTHS), pivot.tzinfo)


def end_of_this_quart(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_end(span_last_day(pivot.date(), QUART_MONTHS), pivot.tzinfo)


def start_of_prev_quart(pivot: pd.Timestamp) -> pd.Timestamp:
    shifted = shift_months(pivot.date(), -QUART_MONTHS)
    return day_start(span_first_day(shifted, QUART_MONTHS), pivot.tzinfo)


def end_of_prev_quart(pivot: pd.Timestamp) -> pd.Timestamp:
    first = span_first_day(pivot.date(), QUART_MONTHS)
    return day_end(shift_days(first, -1), pivot.tzinfo)


# ---- Half year ----

def start_of_this_half_year(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_start(span_first_day(pivot.date(), HALF_YEAR_MONTHS), pivot.tzinfo)


def end_of_this_half_year(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_end(span_last_day(pivot.date(), HALF_YEAR_MONTHS), pivot.tzinfo)


def start_of_prev_half_year(pivot: pd.Timestamp) -> pd.Timestamp:
    shifted = shift_months(pivot.date(), -HALF_YEAR_MONTHS)
    return day_start(span_first_day(shifted, HALF_YEAR_MONTHS), pivot.tzinfo)


def end_of_prev_half_year(pivot: pd.Timestamp) -> pd.Timestamp:
    first = span_first_day(pivot.date(), HALF_YEAR_MONTHS)
    return day_end(shift_days(first, -1), pivot.tzinfo)


# ---- Year ----

def start_of_this_year(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_start(date(pivot.year, 1, 1), pivot.tzinfo)


def end_of_this_year(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_end(date(pivot.year, 12, 31), pivot.tzinfo)


def start_of_prev_year(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_start(date(pivot.year - 1, 1, 1), pivot.tzinfo)


def end_of_prev_year(pivot: pd.Timestamp) -> pd.Timestamp:
    return day_end(shift_days(date(pivot.year, 1, 1), -1), pivot.tzinfo)


# ---- Rule sets ----

MONDAY_WEEK_RULES = (
    CalendarRule(TIME_START_OF_THIS_WEEK, start_of_this_week),
    CalendarRule(TIME_END_OF_THIS_WEEK, end_of_this_week),
    CalendarRule(TIME_START_OF_PREV_WEEK, start_of_prev_week),
    CalendarRule(TIME_END_OF_PREV_WEEK, end_of_prev_week),
)

SUNDAY_WEEK_RULES = (
    CalendarRule(TIME_START_OF_THIS_WEEK, start_of_this_week_sunday),
    CalendarRule(TIME_END_OF_THIS_WEEK, end_of_this_week_sunday),
    CalendarRule(TIME_START_OF_PREV_WEEK, start_of_prev_week_sunday),
    CalendarRule(TIME_END_OF_PREV_WEEK, end_of_prev_week_sunday),
)

DEFAULT_TIME_RULES = (
    CalendarRule(TIME_AS_IS, as_is),
    CalendarRule(TIME_START_OF_THIS_DAY, start_of_this_day),
    CalendarRule(TIME_END_OF_THIS_DAY, end_of_this_day),
    CalendarRule(TIME_START_OF_PREV_DAY, start_of_prev_day),
    CalendarRule(TIME_END_OF_PREV_DAY, end_of_prev_day),
    *MONDAY_WEEK_RULES,
    CalendarRule(TIME_START_OF_THIS_MONTH, start_of_this_month),
    CalendarRule(TIME_END_OF_THIS_MONTH, end_of_this_month),
    CalendarRule(TIME_START_OF_PREV_MONTH, start_of_prev_month),
    CalendarRule(TIME_END_OF_PREV_MONTH, end_of_prev_month),
    CalendarRule(TIME_START_OF_THIS_QUART, start_of_this_quart),
    CalendarRule(TIME_END_OF_THIS_QUART, end_of_this_quart),
    CalendarRule(TIME_START_OF_PREV_QUART, start_of_prev_quart),
    CalendarRule(TIME_END_OF_PREV_QUART, end_of_prev_quart),
    CalendarRule(TIME_START_OF_THIS_HALF_YEAR, start_of_this_half_year),
    CalendarRule(TIME_END_OF_THIS_HALF_YEAR, end_of_this_half_year),
    CalendarRule(TIME_START_OF_PREV_HALF_YEAR, start_of_prev_half_year),
    CalendarRule(TIME_END_OF_PREV_HALF_YEAR, end_of_prev_half_year),
    CalendarRule(TIME_START_OF_THIS_YEAR, start_of_this_year),
    CalendarRule(TIME_END_OF_THIS_YEAR, end_of_this_year),
    CalendarRule(TIME_START_OF_PREV_YEAR, start_of_prev_year),
    CalendarRule(TIME_END_OF_PREV_YEAR, end_of_prev_year),
)


def week_rules(week_start: WeekStart | str) -> tuple[CalendarRule, ...]:
    """
    Return the four week rules for a week-start mode.

    Args:
        week_start: WeekStart member or "monday" / "sunday"

    Returns:
        Rules for start/end of this/prev week

    Raises:
        ValueError: If week_start names no known mode
    """
    if normalize_week_start(week_start) is WeekStart.SUNDAY:
        return SUNDAY_WEEK_RULES
    return MONDAY_WEEK_RULES


__all__ = [
    "TimeRule",
    "CalendarRule",
    "as_is",
    "start_of_this_day",
    "end_of_this_day",
    "start_of_prev_day",
    "end_of_prev_day",
    "start_of_this_week",
    "end_of_this_week",
    "start_of_prev_week",
    "end_of_prev_week",
    "start_of_this_week_sunday",
    "end_of_this_week_sunday",
    "start_of_prev_week_sunday",
    "end_of_prev_week_sunday",
    "start_of_this_month",
    "end_of_this_month",
    "start_of_prev_month",
    "end_of_prev_month",
    "start_of_this_quart",
    "end_of_this_quart",
    "start_of_prev_quart",
    "end_of_prev_quart",
    "start_of_this_half_year",
    "end_of_this_half_year",
    "start_of_prev_half_year",
    "end_of_prev_half_year",
    "start_of_this_year",
    "end_of_this_year",
    "start_of_prev_year",
    "end_of_prev_year",
    "MONDAY_WEEK_RULES",
    "SUNDAY_WEEK_RULES",
    "DEFAULT_TIME_RULES",
    "week_rules",
]
