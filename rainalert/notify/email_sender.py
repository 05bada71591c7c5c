"""Email leg: sends the raw alert email through AWS SES."""

import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from rainalert.notify.errors import NotificationError
from rainalert.notify.message import build_raw_email

logger = logging.getLogger(__name__)


class SesEmailSender:
    def __init__(self, sender: str, recipient: str, client=None):
        self.sender = sender
        self.recipient = recipient
        self.client = client if client is not None else boto3.client("ses")

    def send(self, summary: str, attachment: bytes) -> str:
        """Send the alert email. Returns the SES message id."""
        raw = build_raw_email(self.sender, self.recipient, summary, attachment)

        logger.info("Sending email to %s.", self.recipient)
        try:
            resp = self.client.send_raw_email(
                Source=self.sender,
                Destinations=[self.recipient],
                RawMessage={"Data": raw},
            )
        except (BotoCoreError, ClientError) as e:
            raise NotificationError(f"sending email: {e}", leg="email") from e

        logger.info("Email sent.")
        return resp.get("MessageId", "")
