"""Lookahead window: timezone resolution, bounds and index selection."""

import logging
from collections.abc import Sequence
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from rainalert.models.forecast import HourlyDatum
from rainalert.signal.rain_filter import format_hour

logger = logging.getLogger(__name__)


class TimezoneError(Exception):
    """Raised when the forecast's timezone name can't be resolved."""


def resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise TimezoneError(f"loading timezone location {name!r}: {e}") from e


def compute_window(
    now: datetime,
    location: ZoneInfo,
    offset_hours: float,
    duration_hours: float,
) -> tuple[datetime, datetime]:
    """Return (start, end) where start = now + offset and end = start + duration.

    Offsets are elapsed time, so they are added in UTC; DST changes in
    location don't stretch or shrink the window.
    """
    start_utc = now.astimezone(UTC) + timedelta(hours=offset_hours)
    end_utc = start_utc + timedelta(hours=duration_hours)
    return start_utc.astimezone(location), end_utc.astimezone(location)


def lower_bound(data: Sequence[HourlyDatum], when: datetime) -> int:
    """First index whose time is >= when. Relies on data sorted by time."""
    ts = when.timestamp()
    lo, hi = 0, len(data)
    while lo < hi:
        mid = (lo + hi) // 2
        if data[mid].time < ts:
            lo = mid + 1
        else:
            hi = mid
    return lo


def select_window(
    data: Sequence[HourlyDatum], start: datetime, end: datetime
) -> tuple[int, int]:
    """Inclusive index range of data points with time in [start, end).

    The range is empty when start_index > end_index.
    """
    start_index = lower_bound(data, start)
    end_index = lower_bound(data, end) - 1

    logger.info(
        "Found index %d for time %s",
        start_index, format_hour(start.timestamp(), start.tzinfo),
    )
    logger.info(
        "Found index %d for time %s",
        end_index, format_hour(end.timestamp(), end.tzinfo),
    )
    return start_index, end_index
