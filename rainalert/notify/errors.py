"""Notification errors."""


class NotificationError(Exception):
    """Raised when a notification leg (email or publish) fails."""

    def __init__(self, message: str, leg: str):
        super().__init__(message)
        self.leg = leg
