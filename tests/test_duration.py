"""Tests for elapsed-time computation."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from timeago import elapsed

BASE = datetime(2013, 8, 30, 12, 0, 0, tzinfo=timezone.utc)


def test_elapsed_is_event_minus_reference():
    assert elapsed(BASE, BASE + timedelta(hours=2)) == timedelta(hours=-2)
    assert elapsed(BASE + timedelta(hours=2), BASE) == timedelta(hours=2)
    assert elapsed(BASE, BASE) == timedelta(0)


def test_elapsed_across_timezones():
    """Aware datetimes compare as instants, whatever their zone."""
    pacific = BASE.astimezone(ZoneInfo("US/Pacific"))
    assert elapsed(pacific, BASE) == timedelta(0)


def test_elapsed_with_timestamps():
    ts = int(BASE.timestamp())
    assert elapsed(ts + 90, BASE) == timedelta(seconds=90)
    assert elapsed(ts, ts + 0.5) == timedelta(milliseconds=-500)


def test_elapsed_rejects_naive_aware_mix():
    naive = datetime(2013, 8, 30, 12)
    with pytest.raises(TypeError, match="naive and a timezone-aware"):
        elapsed(naive, BASE)
    with pytest.raises(TypeError, match="Got naive ref"):
        elapsed(BASE, naive)


def test_elapsed_rejects_unsupported_types():
    with pytest.raises(TypeError, match="must be a datetime or a Unix timestamp"):
        elapsed("2013-08-30", BASE)  # type: ignore[arg-type]
    with pytest.raises(TypeError, match="Got 'bool'"):
        elapsed(True, BASE)  # type: ignore[arg-type]
