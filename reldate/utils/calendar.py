"""Calendar Helpers
----------------

Low-level helpers shared by the time rules: pivot coercion, wall-clock
handling and day boundary construction.

All arithmetic happens on the pivot's wall clock. Boundaries are built as
naive timestamps and then placed back into the pivot's own zone, so a pivot
in UTC-8 yields boundaries in UTC-8 (no timezone conversion ever happens).

Examples:
  >>> to_pivot("2019-12-11 00:02:01")
  Timestamp('2019-12-11 00:02:01')

  >>> day_end(date(2019, 12, 11), None)
  Timestamp('2019-12-11 23:59:59.999999999')
"""

from __future__ import annotations
from datetime import date, tzinfo
from typing import Any, Optional

import pandas as pd
from pandas.errors import OutOfBoundsDatetime

try:
    from dateutil.relativedelta import relativedelta
except ImportError as e:
    raise ImportError("python-dateutil not installed. pip install python-dateutil") from e


# Offset from the start of a day to its last representable instant
DAY_END = pd.Timedelta(days=1) - pd.Timedelta(1, unit="ns")


def to_pivot(value: Any) -> pd.Timestamp:
    """
    Coerce a timestamp-like value to a nanosecond-resolution pandas Timestamp.

    Accepts pandas Timestamps, datetime/date objects, numpy datetime64 values
    and ISO strings understood by pandas. The zone (or its absence) is kept
    exactly as given.

    Args:
        value: Timestamp-like pivot

    Returns:
        pandas Timestamp with nanosecond unit

    Raises:
        TypeError: If value is None, NaT or cannot be read as a timestamp
        OutOfBoundsDatetime: If value lies outside the nanosecond range
            (1677-09-21 .. 2262-04-11). Pivots inside the range but close to
            its ends can still overflow when a boundary (e.g. "start prev
            year" in 1677, "end this year" in 2262) falls outside it.

    Examples:
        >>> to_pivot(datetime(2020, 8, 11, tzinfo=timezone.utc))
        Timestamp('2020-08-11 00:00:00+0000', tz='UTC')
    """
    if value is None:
        raise TypeError("pivot must be a timestamp-like value, got None")

    try:
        ts = pd.Timestamp(value)
        if pd.isna(ts):
            raise TypeError("pivot must not be NaT")
        return ts.as_unit("ns")
    except OutOfBoundsDatetime as e:
        raise OutOfBoundsDatetime(
            f"pivot {value!r} is outside the nanosecond timestamp range "
            f"({pd.Timestamp.min} .. {pd.Timestamp.max})"
        ) from e
    except ValueError as e:
        raise TypeError(f"pivot {value!r} is not a timestamp-like value") from e


def localize(
    naive: pd.Timestamp,
    zone: Optional[tzinfo],
    first_occurrence: bool = True,
) -> pd.Timestamp:
    """
    Place a naive wall-clock timestamp into the given zone.

    Wall-clock times inside a DST gap are shifted forward to the first valid
    instant. An ambiguous wall-clock time (inside a fall-back hour) resolves
    to its first (DST) occurrence, or to its second one when
    ``first_occurrence`` is False.

    Args:
        naive: Naive timestamp holding the wall-clock reading
        zone: Target tzinfo, or None to stay naive
        first_occurrence: Which occurrence an ambiguous time maps to

    Returns:
        Timestamp in the given zone
    """
    naive = naive.as_unit("ns")
    if zone is None:
        return naive
    return naive.tz_localize(zone, ambiguous=first_occurrence, nonexistent="shift_forward")


def day_start(day: date, zone: Optional[tzinfo]) -> pd.Timestamp:
    """Return 00:00:00.000000000 of the given calendar day in zone."""
    return localize(pd.Timestamp(day.year, day.month, day.day), zone)


def day_end(day: date, zone: Optional[tzinfo]) -> pd.Timestamp:
    """
    Return 23:59:59.999999999 of the given calendar day in zone.

    An ambiguous end of day takes the later occurrence, so it stays one
    nanosecond before the next day's start and after every instant of the day.
    """
    start = pd.Timestamp(day.year, day.month, day.day).as_unit("ns")
    return localize(start + DAY_END, zone, first_occurrence=False)


def shift_days(day: date, days: int) -> date:
    """Move a calendar day by a number of days (negative goes back)."""
    return day + relativedelta(days=days)


def shift_months(day: date, months: int) -> date:
    """
    Move a calendar day by a number of months.

    The day of month is clamped to the target month's length, so
    March 31 minus one month is February 28 (or 29 in a leap year).
    """
    return day + relativedelta(months=months)


def span_first_day(day: date, span: int) -> date:
    """
    Return the first day of the span-month block containing day.

    Blocks are aligned to January: span=1 is the month, 3 the quarter,
    6 the half-year and 12 the year.

    Examples:
        >>> span_first_day(date(2019, 8, 11), 3)
        datetime.date(2019, 7, 1)
    """
    index = (day.month - 1) // span
    return date(day.year, index * span + 1, 1)


def span_last_day(day: date, span: int) -> date:
    """
    Return the last day of the span-month block containing day.

    Computed as January 1 plus the months up to the next block, minus one
    day, which handles month lengths and leap years without a lookup table.

    Examples:
        >>> span_last_day(date(2019, 7, 11), 3)
        datetime.date(2019, 9, 30)
    """
    index = (day.month - 1) // span
    return date(day.year, 1, 1) + relativedelta(months=index * span + span, days=-1)


__all__ = [
    "DAY_END",
    "to_pivot",
    "localize",
    "day_start",
    "day_end",
    "shift_days",
    "shift_months",
    "span_first_day",
    "span_last_day",
]
