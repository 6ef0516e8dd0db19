"""Tests for period registries.

These tests verify:
- Every built-in period shortcut resolves to the matching time boundaries
- Rendering through the period and time formatters
- Custom period rules and swapping the time registry
- Missing shortcuts at both levels

Run with: pytest tests/test_periodregistry.py -v
"""

import logging

import pandas as pd
import pytest

from conftest import ts
from reldate.periods import (
    PERIOD_PREV_QUART,
    PERIOD_PREV_WEEK,
    PERIOD_SHORTCUTS,
    PERIOD_THIS_MONTH,
    PERIOD_THIS_WEEK,
    BoundaryPairRule,
    GuardedPeriodRegistry,
    Period,
    PeriodRegistry,
    new_nonblocking_period_registry,
    new_period_registry,
)
from reldate.periods.periodrules import DEFAULT_PERIOD_RULES
from reldate.times import TimeRegistry, new_nonblocking_time_registry, new_time_registry


@pytest.fixture(params=[new_period_registry, new_nonblocking_period_registry],
                ids=["guarded", "nonblocking"])
def make_registry(request):
    """Factory for a fresh period registry of each flavour."""
    return request.param


class PrevDecadeRule:
    """The decade before the pivot's decade, built from yearly boundaries."""

    def calculate(self, pivot, time_registry):
        offset = pd.DateOffset(years=pivot.year % 10)
        return (
            time_registry.require(pivot - pd.DateOffset(years=10) - offset, "start this year"),
            time_registry.require(pivot - offset, "end this year"),
        )

    def shortcut(self):
        return "prev decade"


class ConstantFormatter:
    def format(self, instant):
        return "test stringer"


# ============================================================================
# Built-in Periods
# ============================================================================

class TestBuiltinPeriods:
    """Test the twelve default period shortcuts"""

    def test_all_builtin_shortcuts_found(self, make_registry, sample_pivots):
        registry = make_registry()
        for pivot in sample_pivots:
            for shortcut in PERIOD_SHORTCUTS:
                p, ok = registry.make(pivot, shortcut)
                assert ok, shortcut
                assert p.shortcut == shortcut
                assert p.from_time.time < p.to_time.time

    def test_boundaries_match_time_shortcuts(self, make_registry, sample_pivots):
        """Each period is the pair of its two time shortcuts"""
        registry = make_registry()
        times = TimeRegistry()
        for pivot in sample_pivots:
            for rule in DEFAULT_PERIOD_RULES:
                p = registry.require(pivot, rule.shortcut())
                assert p.from_time == times.require(pivot, rule.from_shortcut)
                assert p.to_time == times.require(pivot, rule.to_shortcut)

    def test_prev_quart(self, make_registry, report_pivot):
        p, ok = make_registry().make(report_pivot, PERIOD_PREV_QUART)
        assert ok
        assert p.from_time.time == ts("2020-04-01", tz="UTC")
        assert p.to_time.time == ts("2020-06-30 23:59:59.999999999", tz="UTC")

    @pytest.mark.parametrize("shortcut,expected", [
        (PERIOD_PREV_WEEK, "2020-08-03 00:00:00 — 2020-08-09 23:59:59"),
        (PERIOD_PREV_QUART, "2020-04-01 00:00:00 — 2020-06-30 23:59:59"),
        (PERIOD_THIS_MONTH, "2020-08-01 00:00:00 — 2020-08-31 23:59:59"),
        (PERIOD_THIS_WEEK, "2020-08-10 00:00:00 — 2020-08-16 23:59:59"),
        ("prev half year", "2020-01-01 00:00:00 — 2020-06-30 23:59:59"),
        ("prev year", "2019-01-01 00:00:00 — 2019-12-31 23:59:59"),
    ])
    def test_rendered(self, make_registry, report_pivot, shortcut, expected):
        """Periods render as '<from> — <to>'"""
        assert str(make_registry().require(report_pivot, shortcut)) == expected

    def test_sunday_first_time_registry(self, make_registry, report_pivot):
        """Week periods follow the time registry's week start"""
        registry = make_registry(time_registry=new_time_registry(week_start="sunday"))
        assert str(registry.require(report_pivot, PERIOD_THIS_WEEK)) == (
            "2020-08-09 00:00:00 — 2020-08-15 23:59:59"
        )


# ============================================================================
# Missing Shortcuts
# ============================================================================

class TestMissing:

    def test_unknown_period(self, make_registry, report_pivot):
        """Unknown period shortcuts yield (Period(), False)"""
        p, ok = make_registry().make(report_pivot, "next week")
        assert ok is False
        assert p.is_zero()
        assert str(p) == ""
        assert make_registry().require(None, "next week").is_zero()

    def test_missing_time_shortcut_gives_zero_side(self, make_registry, report_pivot):
        """A rule naming an unknown time shortcut gets a zero Time on that side"""
        registry = make_registry()
        registry.extend([BoundaryPairRule("broken", "start prev week", "end next week")])
        p, ok = registry.make(report_pivot, "broken")
        assert ok
        assert not p.from_time.is_zero()
        assert p.to_time.is_zero()
        assert str(p) == "2020-08-03 00:00:00 — "

    def test_miss_logs_suggestions(self, make_registry, report_pivot, caplog):
        caplog.set_level(logging.DEBUG, logger="reldate.periods.periodregistry")
        make_registry().make(report_pivot, "prev quarter")
        assert "prev quart" in caplog.text

    def test_suggest(self, make_registry):
        assert make_registry().suggest("prev quarter")[0] == "prev quart"


# ============================================================================
# Custom Rules & Formatters
# ============================================================================

class TestCustomisation:

    def test_prev_decade_rule(self, make_registry):
        registry = make_registry()
        registry.extend([PrevDecadeRule()])
        p, ok = registry.make(ts("1998-03-01 00:02:01", tz="UTC"), "prev decade")
        assert ok
        assert p.from_time.time == ts("1980-01-01", tz="UTC")
        assert p.to_time.time == ts("1990-12-31 23:59:59.999999999", tz="UTC")

    def test_boundary_pair_rule(self, make_registry):
        registry = make_registry()
        registry.extend([BoundaryPairRule("last year", "start prev year", "end prev year")])
        assert str(registry.require(ts("1998-03-01"), "last year")) == (
            "1997-01-01 00:00:00 — 1997-12-31 23:59:59"
        )

    def test_set_time_registry(self, make_registry):
        """Rules resolve against the time registry in place at call time"""
        registry = make_registry()
        pivot = ts("2010-03-01 00:02:01", tz="UTC")
        assert str(registry.require(pivot, PERIOD_PREV_WEEK)) == (
            "2010-02-22 00:00:00 — 2010-02-28 23:59:59"
        )

        registry.set_time_registry(new_time_registry(formatter=ConstantFormatter()))
        assert str(registry.require(pivot, PERIOD_PREV_WEEK)) == "test stringer — test stringer"

    def test_set_time_registry_none(self, make_registry):
        with pytest.raises(ValueError):
            make_registry().set_time_registry(None)

    def test_time_registry_property(self, make_registry):
        times = new_nonblocking_time_registry()
        assert make_registry(time_registry=times).time_registry is times

    def test_default_owns_time_registry(self, make_registry):
        """Without a time registry each period registry gets its own"""
        first = make_registry()
        second = make_registry()
        assert isinstance(first.time_registry, TimeRegistry)
        assert first.time_registry is not second.time_registry

    def test_period_formatter_gets_shortcut(self, make_registry, report_pivot):
        """Formatters receive the shortcut as context"""
        registry = make_registry(
            formatter=lambda from_time, to_time, shortcut: f"{shortcut}: {from_time} .. {to_time}"
        )
        assert str(registry.require(report_pivot, PERIOD_PREV_WEEK)) == (
            "prev week: 2020-08-03 00:00:00 .. 2020-08-09 23:59:59"
        )

    def test_formatter_is_snapshotted(self, make_registry, report_pivot):
        registry = make_registry()
        before = registry.require(report_pivot, PERIOD_PREV_WEEK)
        registry.set_formatter(None)
        after = registry.require(report_pivot, PERIOD_PREV_WEEK)
        assert str(before) == "2020-08-03 00:00:00 — 2020-08-09 23:59:59"
        assert str(after) == ""
        assert not after.is_zero()
        assert registry.formatter is None

    def test_copy_shares_time_registry(self, make_registry):
        registry = make_registry()
        clone = registry.copy()
        clone.extend([PrevDecadeRule()])
        assert "prev decade" in clone
        assert "prev decade" not in registry
        assert clone.time_registry is registry.time_registry
        assert type(clone) is type(registry)

    def test_factory_flavours(self):
        assert isinstance(new_period_registry(), GuardedPeriodRegistry)
        assert isinstance(new_nonblocking_period_registry(), PeriodRegistry)

    def test_len_and_shortcuts(self, make_registry):
        registry = make_registry()
        assert len(registry) == 12
        assert registry.shortcuts() == list(PERIOD_SHORTCUTS)


class TestZeroPeriod:

    def test_zero_value(self):
        p = Period()
        assert p.is_zero()
        assert p.from_time.is_zero() and p.to_time.is_zero()
        assert p.shortcut == ""
        assert str(p) == ""
