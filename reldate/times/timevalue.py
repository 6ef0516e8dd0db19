"""Time values and their formatters.

A ``Time`` pairs a resolved instant with the formatter that was active on the
registry when it was made. Replacing a registry's formatter later does not
change values already handed out.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Union, runtime_checkable

import pandas as pd


@runtime_checkable
class TimeFormatter(Protocol):
    """Renders one instant as text."""

    def format(self, instant: pd.Timestamp) -> str: ...


# A formatter object, or a bare callable with the same signature
TimeFormatterLike = Union[TimeFormatter, Callable[[pd.Timestamp], str]]


class DefaultTimeFormatter:
    """Renders ``YYYY-MM-DD HH:MM:SS`` in the instant's own zone."""

    FORMAT = "%Y-%m-%d %H:%M:%S"

    def format(self, instant: pd.Timestamp) -> str:
        return instant.strftime(self.FORMAT)

    def __repr__(self) -> str:
        return "DefaultTimeFormatter()"


DEFAULT_TIME_FORMATTER = DefaultTimeFormatter()


def call_formatter(formatter: Any, *args: Any) -> str:
    """Invoke a formatter object's ``format`` method, or the formatter itself."""
    method = getattr(formatter, "format", None)
    if callable(method):
        return method(*args)
    return formatter(*args)


@dataclass(frozen=True)
class Time:
    """
    Resolved instant plus the formatter snapshot used to render it.

    ``Time()`` is the zero value returned when a shortcut is not found: its
    instant is ``NaT`` and it has no formatter.

    Example:
        >>> t = Time(pd.Timestamp("2020-08-03"), DEFAULT_TIME_FORMATTER)
        >>> str(t)
        '2020-08-03 00:00:00'
        >>> Time().is_zero()
        True
    """

    time: pd.Timestamp = pd.NaT
    formatter: Optional[TimeFormatterLike] = None

    def __str__(self) -> str:
        if self.formatter is None:
            return ""
        return call_formatter(self.formatter, self.time)

    def is_zero(self) -> bool:
        """True for the value produced by a failed lookup."""
        return self.formatter is None and pd.isna(self.time)


__all__ = [
    "TimeFormatter",
    "TimeFormatterLike",
    "DefaultTimeFormatter",
    "DEFAULT_TIME_FORMATTER",
    "call_formatter",
    "Time",
]
