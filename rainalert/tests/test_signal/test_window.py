"""Tests for lookahead window computation and index selection."""

from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

from conftest import HOUR, NOW, NOW_TS
from rainalert.models.forecast import HourlyDatum
from rainalert.signal.window import (
    TimezoneError,
    compute_window,
    lower_bound,
    resolve_timezone,
    select_window,
)


def _hours(n: int, start_ts: int = NOW_TS) -> tuple[HourlyDatum, ...]:
    return tuple(HourlyDatum(time=start_ts + i * HOUR, precip_probability=0.0) for i in range(n))


def _at(ts: int) -> datetime:
    return datetime.fromtimestamp(ts, UTC)


class TestResolveTimezone:
    def test_known_zone(self):
        assert resolve_timezone("America/New_York") == ZoneInfo("America/New_York")

    @pytest.mark.parametrize("name", ["Mars/Olympus_Mons", "Not/AZone", "America"])
    def test_unknown_zone(self, name: str):
        with pytest.raises(TimezoneError, match="loading timezone location"):
            resolve_timezone(name)


class TestComputeWindow:
    def test_offsets(self):
        start, end = compute_window(NOW, ZoneInfo("UTC"), 9, 13)
        assert start == NOW + timedelta(hours=9)
        assert end == start + timedelta(hours=13)

    def test_expressed_in_location(self):
        tz = ZoneInfo("America/New_York")
        start, end = compute_window(NOW, tz, 9, 13)
        assert start.tzinfo == tz
        # 12:00 UTC is 07:00 EST; +9h is 16:00 local.
        assert start.hour == 16
        assert end - start == timedelta(hours=13)

    def test_spring_forward_start_is_elapsed_time(self):
        # 2026-03-08 05:00 UTC is 00:00 EST; clocks jump to EDT at 02:00 local.
        now = datetime(2026, 3, 8, 5, 0, tzinfo=UTC)
        start, end = compute_window(now, ZoneInfo("America/New_York"), 9, 13)
        assert start.timestamp() - now.timestamp() == 9 * HOUR
        assert end.timestamp() - start.timestamp() == 13 * HOUR
        assert start.hour == 10

    def test_fall_back_duration_is_elapsed_time(self):
        # Window runs across 2026-11-01 02:00 EDT -> 01:00 EST.
        now = datetime(2026, 10, 31, 18, 0, tzinfo=UTC)
        start, end = compute_window(now, ZoneInfo("America/New_York"), 9, 13)
        assert start.timestamp() - now.timestamp() == 9 * HOUR
        assert end.timestamp() - start.timestamp() == 13 * HOUR
        assert end.astimezone(UTC) == datetime(2026, 11, 1, 16, 0, tzinfo=UTC)


class TestLowerBound:
    def test_exact_match(self):
        data = _hours(10)
        assert lower_bound(data, _at(NOW_TS + 3 * HOUR)) == 3

    def test_between_points(self):
        data = _hours(10)
        assert lower_bound(data, _at(NOW_TS + 3 * HOUR + 1)) == 4

    def test_before_all(self):
        assert lower_bound(_hours(5), _at(NOW_TS - HOUR)) == 0

    def test_after_all(self):
        assert lower_bound(_hours(5), _at(NOW_TS + 10 * HOUR)) == 5

    def test_empty(self):
        assert lower_bound((), NOW) == 0


class TestSelectWindow:
    def test_default_window(self):
        data = _hours(48)
        start, end = compute_window(NOW, ZoneInfo("UTC"), 9, 13)
        s, e = select_window(data, start, end)
        assert (s, e) == (9, 21)

    def test_range_is_half_open(self):
        data = _hours(48)
        for offset in range(0, 30):
            start = _at(NOW_TS + offset * 1800)
            end = start + timedelta(hours=5, minutes=17)
            s, e = select_window(data, start, end)
            inside = [i for i, d in enumerate(data) if start.timestamp() <= d.time < end.timestamp()]
            assert list(range(s, e + 1)) == inside

    def test_window_past_data_is_empty(self):
        data = _hours(5)
        s, e = select_window(data, _at(NOW_TS + 10 * HOUR), _at(NOW_TS + 20 * HOUR))
        assert s > e

    def test_window_between_points_is_empty(self):
        data = _hours(5)
        s, e = select_window(data, _at(NOW_TS + 60), _at(NOW_TS + 120))
        assert s > e

    def test_empty_data(self):
        s, e = select_window((), NOW, NOW + timedelta(hours=13))
        assert s > e
