"""Rain filter: keeps hours at or above the precipitation threshold."""

import logging
from collections.abc import Sequence
from datetime import datetime, tzinfo

from rainalert.config.defaults import DEFAULT_RAIN_THRESHOLD
from rainalert.models.forecast import HourlyDatum
from rainalert.models.notification import RainEvent

logger = logging.getLogger(__name__)


def format_hour(ts: float, location: tzinfo | None) -> str:
    """Format a unix timestamp like "Jan 2 3:04PM" in the given timezone."""
    dt = datetime.fromtimestamp(ts, location)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%b} {dt.day} {hour}:{dt:%M}{meridiem}"


def filter_rain(
    data: Sequence[HourlyDatum],
    location: tzinfo,
    start_index: int,
    end_index: int,
    threshold: float = DEFAULT_RAIN_THRESHOLD,
) -> list[RainEvent]:
    """Rain events for data[start_index..end_index] (inclusive), in input order."""
    lo = max(start_index, 0)
    hi = min(end_index, len(data) - 1)

    events: list[RainEvent] = []
    for datum in data[lo:hi + 1]:
        when = format_hour(datum.time, location)
        percent = 100 * datum.precip_probability
        if datum.precip_probability >= threshold:
            logger.debug("%s: %.0f%% chance of rain, keeping", when, percent)
            events.append(RainEvent(formatted_time=when, probability_percent=percent))
        else:
            logger.debug("%s: %.0f%% chance of rain, below threshold", when, percent)
    return events
