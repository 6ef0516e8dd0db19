"""Shared test fixtures and utilities for reldate tests."""

from datetime import timedelta, timezone

import pandas as pd
import pytest

from reldate.periods.periodapi import reset_default_period_registry
from reldate.times.timeapi import reset_default_time_registry


def fixed_zone(hours: int) -> timezone:
    """Fixed UTC offset, e.g. fixed_zone(-8) for UTC-8."""
    return timezone(timedelta(hours=hours), f"UTC{hours:+d}")


def ts(text: str, tz=None) -> pd.Timestamp:
    """Shorthand for a nanosecond-resolution Timestamp."""
    return pd.Timestamp(text, tz=tz).as_unit("ns")


@pytest.fixture(autouse=True)
def fresh_defaults(monkeypatch):
    """Give every test freshly built process-wide registries.

    Also clears RELDATE_WEEK_START so the host environment cannot change
    the default week start under a test.
    """
    monkeypatch.delenv("RELDATE_WEEK_START", raising=False)
    reset_default_time_registry()
    reset_default_period_registry()
    yield
    reset_default_time_registry()
    reset_default_period_registry()


@pytest.fixture
def pivot():
    """Wednesday 2019-12-11 00:02:01.000000006 UTC, the reference pivot."""
    return ts("2019-12-11 00:02:01.000000006", tz="UTC")


@pytest.fixture
def report_pivot():
    """Tuesday 2020-08-11 00:02:01.000000006 UTC."""
    return ts("2020-08-11 00:02:01.000000006", tz="UTC")


@pytest.fixture
def sample_pivots():
    """Pivots spread over weekdays, month ends, leap days and offsets."""
    return [
        ts("2019-12-11 00:02:01.000000006", tz="UTC"),
        ts("2020-08-09 00:00:00", tz="UTC"),          # Sunday
        ts("2020-02-29 12:00:00", tz=fixed_zone(4)),  # leap day
        ts("2019-03-31 23:59:59", tz=fixed_zone(-8)), # month end
        ts("2021-01-01 00:00:00", tz=fixed_zone(-1)), # year start
        ts("2018-07-01 06:30:00"),                    # naive
    ]
