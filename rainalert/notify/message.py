"""Summary text and raw MIME email construction."""

from collections.abc import Iterable
from email.mime.application import MIMEApplication
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from rainalert.config.defaults import ATTACHMENT_FILENAME, EMAIL_SUBJECT
from rainalert.models.notification import RainEvent


def build_summary(events: Iterable[RainEvent]) -> str:
    """One "{time}: {percent}%" line per event."""
    return "\n".join(
        f"{e.formatted_time}: {e.probability_percent:.0f}%" for e in events
    )


def build_raw_email(
    sender: str,
    recipient: str,
    summary: str,
    attachment: bytes,
    subject: str = EMAIL_SUBJECT,
) -> bytes:
    """Multipart message: plain-text summary plus the forecast as data.json."""
    msg = MIMEMultipart("mixed")
    msg["From"] = sender
    msg["To"] = recipient
    msg["Subject"] = subject

    msg.attach(MIMEText(summary, "plain"))

    part = MIMEApplication(attachment, _subtype="json")
    part.add_header("Content-Disposition", "attachment", filename=ATTACHMENT_FILENAME)
    msg.attach(part)

    return msg.as_bytes()
