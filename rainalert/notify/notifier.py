"""Notifier: concurrent email + publish fan-out with first-error-wins."""

import json
import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed

from rainalert.config.schema import NotificationConfig
from rainalert.models.notification import RainEvent
from rainalert.notify.email_sender import SesEmailSender
from rainalert.notify.message import build_summary
from rainalert.notify.publisher import SnsPublisher

logger = logging.getLogger(__name__)


class Notifier:
    """Sends one email and one topic publish per call.

    Both legs always run. The first leg to fail has its error raised
    without waiting for the other, which keeps running to completion.
    """

    def __init__(self, email_sender: SesEmailSender, publisher: SnsPublisher):
        self.email_sender = email_sender
        self.publisher = publisher

    @classmethod
    def from_config(cls, config: NotificationConfig) -> "Notifier":
        return cls(
            SesEmailSender(sender=config.email_from, recipient=config.email_to),
            SnsPublisher(topic_arn=config.topic_arn),
        )

    def notify(self, events: Sequence[RainEvent], raw: dict) -> None:
        if not events:
            return

        summary = build_summary(events)
        attachment = json.dumps(raw).encode()

        pool = ThreadPoolExecutor(max_workers=2, thread_name_prefix="notify")
        try:
            futures = [
                pool.submit(self.email_sender.send, summary, attachment),
                pool.submit(self.publisher.publish, summary),
            ]
            for future in as_completed(futures):
                exc = future.exception()
                if exc is not None:
                    logger.error("Notification failed: %s", exc)
                    raise exc
        finally:
            pool.shutdown(wait=False)

        logger.info("Notified about %d rainy hour(s)", len(events))
