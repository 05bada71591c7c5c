"""Publish leg: posts the summary to an AWS SNS topic."""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rainalert.notify.errors import NotificationError

logger = logging.getLogger(__name__)


class SnsPublisher:
    def __init__(self, topic_arn: str, client=None):
        self.topic_arn = topic_arn
        self.client = client if client is not None else boto3.client("sns")

    def publish(self, summary: str) -> str:
        """Publish the summary text. Returns the SNS message id."""
        logger.info("Publishing message to SNS topic %s", self.topic_arn)
        try:
            resp = self.client.publish(TopicArn=self.topic_arn, Message=summary)
        except (BotoCoreError, ClientError) as e:
            raise NotificationError(f"publishing message: {e}", leg="publish") from e

        logger.info("Message published.")
        return resp.get("MessageId", "")
