"""Check pipeline: fetch -> window -> filter -> notify, once per invocation."""

import logging
import time
from collections.abc import Callable
from datetime import datetime

from rainalert.config.schema import RainAlertConfig
from rainalert.ingest.forecast_client import ForecastClient
from rainalert.models.common import utc_now
from rainalert.models.reporting import RunSummary
from rainalert.notify.message import build_summary
from rainalert.notify.notifier import Notifier
from rainalert.signal.rain_filter import filter_rain
from rainalert.signal.window import compute_window, resolve_timezone, select_window

logger = logging.getLogger(__name__)


class RainCheckPipeline:
    def __init__(
        self,
        config: RainAlertConfig,
        client: ForecastClient,
        notifier: Notifier,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.config = config
        self.client = client
        self.notifier = notifier
        self.clock = clock

    @classmethod
    def from_config(cls, config: RainAlertConfig) -> "RainCheckPipeline":
        return cls(
            config,
            ForecastClient.from_config(config.forecast),
            Notifier.from_config(config.notification),
        )

    def run(self, dry_run: bool = False) -> RunSummary:
        """Run one check. Every failure propagates; there is no partial success.

        Each call notifies independently, so identical forecasts on
        consecutive runs produce duplicate notifications.
        """
        start_time = time.monotonic()
        policy = self.config.policy

        forecast = self.client.fetch_forecast()
        location = resolve_timezone(forecast.timezone)

        start, end = compute_window(
            self.clock(), location, policy.lookahead_offset_hours, policy.window_hours
        )
        data = forecast.hourly
        start_index, end_index = select_window(data, start, end)

        events = filter_rain(
            data, location, start_index, end_index, threshold=policy.rain_threshold
        )

        summary = RunSummary(
            timezone=forecast.timezone,
            window_start=start.isoformat(),
            window_end=end.isoformat(),
            start_index=start_index,
            end_index=end_index,
            hours_evaluated=max(0, end_index - start_index + 1),
            rain_events=events,
            message=build_summary(events),
            dry_run=dry_run,
        )

        if not events:
            logger.info("No rain to worry about :).")
        elif dry_run:
            logger.info("Dry run: skipping notification for %d rainy hour(s)", len(events))
        else:
            self.notifier.notify(events, forecast.raw)
            summary.notified = True

        summary.duration_seconds = round(time.monotonic() - start_time, 3)
        return summary
