"""Period values and their formatters.

A ``Period`` holds two Time values, the shortcut that produced them and the
period formatter active on the registry at the time. The shortcut is kept
because formatters receive it as context ("previous week is ...").
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Optional, Protocol, Union, runtime_checkable

from reldate.times.timevalue import Time, call_formatter


@runtime_checkable
class PeriodFormatter(Protocol):
    """Renders a (from, to) pair as text, given the period shortcut."""

    def format(self, from_time: Time, to_time: Time, shortcut: str) -> str: ...


PeriodFormatterLike = Union[PeriodFormatter, Callable[[Time, Time, str], str]]


class DefaultPeriodFormatter:
    """
    Renders ``<from> — <to>``.

    Each side goes through its own Time formatter, so swapping the time
    registry's formatter changes how periods print too.
    """

    SEPARATOR = " — "

    def format(self, from_time: Time, to_time: Time, shortcut: str) -> str:
        return f"{from_time}{self.SEPARATOR}{to_time}"

    def __repr__(self) -> str:
        return "DefaultPeriodFormatter()"


DEFAULT_PERIOD_FORMATTER = DefaultPeriodFormatter()


@dataclass(frozen=True)
class Period:
    """
    Resolved date range.

    ``Period()`` is the zero value returned when a shortcut is not found.

    Example:
        >>> p = period_registry.require(pd.Timestamp("2020-08-11"), "prev quart")
        >>> str(p)
        '2020-04-01 00:00:00 — 2020-06-30 23:59:59'
        >>> p.to_time.time
        Timestamp('2020-06-30 23:59:59.999999999')
    """

    from_time: Time = field(default_factory=Time)
    to_time: Time = field(default_factory=Time)
    shortcut: str = ""
    formatter: Optional[PeriodFormatterLike] = None

    def __str__(self) -> str:
        if self.formatter is None:
            return ""
        return call_formatter(self.formatter, self.from_time, self.to_time, self.shortcut)

    def is_zero(self) -> bool:
        """True for the value produced by a failed lookup."""
        return self.formatter is None and self.from_time.is_zero() and self.to_time.is_zero()


__all__ = [
    "PeriodFormatter",
    "PeriodFormatterLike",
    "DefaultPeriodFormatter",
    "DEFAULT_PERIOD_FORMATTER",
    "Period",
]
