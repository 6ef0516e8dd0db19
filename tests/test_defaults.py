"""Tests for the module-level API and the process-wide default registries.

The autouse fixture in conftest.py resets both defaults around every test.

Run with: pytest tests/test_defaults.py -v
"""

import logging

import pytest

from conftest import ts
import reldate
from reldate import (
    CalendarRule,
    GuardedPeriodRegistry,
    GuardedTimeRegistry,
    WeekStart,
    get_default_period_registry,
    get_default_time_registry,
    new_nonblocking_time_registry,
    new_period,
    new_period_registry,
    new_time,
    new_time_registry,
    require_period,
    require_time,
    reset_default_period_registry,
    reset_default_time_registry,
    set_default_period_registry,
    set_default_time_registry,
    set_default_week_start,
)
from reldate.times.timeapi import WEEK_START_ENV, default_week_start


WEDNESDAY = "2020-07-08 10:00"


# ============================================================================
# Module-level resolution
# ============================================================================

class TestModuleLevelApi:

    def test_new_time(self, report_pivot):
        t, ok = new_time(report_pivot, "start prev week")
        assert ok
        assert str(t) == "2020-08-03 00:00:00"

    def test_new_time_unknown(self, report_pivot):
        t, ok = new_time(report_pivot, "start next week")
        assert ok is False and t.is_zero()

    def test_require_time(self, report_pivot):
        assert str(require_time(report_pivot, "end prev year")) == "2019-12-31 23:59:59"
        assert require_time(report_pivot, "nope").is_zero()

    def test_new_period(self, report_pivot):
        p, ok = new_period(report_pivot, "prev week")
        assert ok
        assert str(p) == "2020-08-03 00:00:00 — 2020-08-09 23:59:59"

    def test_require_period(self, report_pivot):
        assert str(require_period(report_pivot, "this month")) == "2020-08-01 00:00:00 — 2020-08-31 23:59:59"
        assert require_period(report_pivot, "nope").is_zero()

    def test_package_exports(self):
        assert reldate.__version__ == "0.1.0"
        for name in reldate.__all__:
            assert hasattr(reldate, name), name


# ============================================================================
# Default registries
# ============================================================================

class TestDefaultRegistries:

    def test_lazy_and_stable(self):
        """The default is built once and reused"""
        first = get_default_time_registry()
        assert isinstance(first, GuardedTimeRegistry)
        assert get_default_time_registry() is first
        assert isinstance(get_default_period_registry(), GuardedPeriodRegistry)

    def test_extend_default(self, report_pivot):
        get_default_time_registry().extend([CalendarRule("pivot itself", lambda p: p)])
        assert require_time(report_pivot, "pivot itself").time == report_pivot

    def test_set_default_time_registry(self, report_pivot, caplog):
        caplog.set_level(logging.INFO, logger="reldate.times.timeapi")
        custom = new_nonblocking_time_registry(formatter=lambda instant: "custom")
        set_default_time_registry(custom)
        assert get_default_time_registry() is custom
        assert str(require_time(report_pivot, "start this day")) == "custom"
        assert "Default time registry replaced" in caplog.text

    def test_reset_default_time_registry(self):
        custom = new_time_registry()
        set_default_time_registry(custom)
        reset_default_time_registry()
        assert get_default_time_registry() is not custom

    def test_set_default_period_registry(self, report_pivot):
        custom = new_period_registry(formatter=lambda f, t, s: s.upper())
        set_default_period_registry(custom)
        assert str(require_period(report_pivot, "prev week")) == "PREV WEEK"
        reset_default_period_registry()
        assert get_default_period_registry() is not custom

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            set_default_time_registry(None)
        with pytest.raises(ValueError):
            set_default_period_registry(None)


# ============================================================================
# Week start of the defaults
# ============================================================================

class TestDefaultWeekStart:

    def test_monday_by_default(self):
        assert default_week_start() is WeekStart.MONDAY
        assert require_time(ts(WEDNESDAY), "start this week").time == ts("2020-07-06")

    def test_set_default_week_start(self):
        set_default_week_start("sunday")
        assert get_default_time_registry().week_start is WeekStart.SUNDAY
        assert require_time(ts(WEDNESDAY), "start this week").time == ts("2020-07-05")
        set_default_week_start(WeekStart.MONDAY)
        assert require_time(ts(WEDNESDAY), "start this week").time == ts("2020-07-06")

    def test_set_default_week_start_invalid(self):
        with pytest.raises(ValueError):
            set_default_week_start("someday")

    def test_period_default_is_independent(self):
        """Changing the default time registry's week start leaves periods alone"""
        set_default_week_start("sunday")
        assert str(require_period(ts(WEDNESDAY), "this week")) == "2020-07-06 00:00:00 — 2020-07-12 23:59:59"

    def test_env_variable(self, monkeypatch):
        monkeypatch.setenv(WEEK_START_ENV, "Sunday")
        reset_default_time_registry()
        reset_default_period_registry()
        assert require_time(ts(WEDNESDAY), "start this week").time == ts("2020-07-05")
        assert str(require_period(ts(WEDNESDAY), "this week")) == "2020-07-05 00:00:00 — 2020-07-11 23:59:59"

    def test_env_variable_invalid(self, monkeypatch, caplog):
        """Unknown values are logged and Monday is used"""
        monkeypatch.setenv(WEEK_START_ENV, "friday")
        with caplog.at_level(logging.WARNING, logger="reldate.times.timeapi"):
            assert default_week_start() is WeekStart.MONDAY
        assert WEEK_START_ENV in caplog.text

    def test_env_variable_blank(self, monkeypatch):
        monkeypatch.setenv(WEEK_START_ENV, "  ")
        assert default_week_start() is WeekStart.MONDAY
