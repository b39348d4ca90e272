"""Error taxonomy for the notifications service."""

from typing import Any


class NotificationsError(Exception):
    """Base class for notification service errors."""


class UpstreamFetchFailure(NotificationsError):
    """A catalog/order/user API call failed, timed out or returned an unusable body.

    Carries the upstream status code when the upstream produced one, otherwise 500.
    """

    def __init__(self, message: str, status_code: int | None = None, errors: Any = None) -> None:
        self.message = message
        self.status_code = status_code or 500
        self.errors = errors
        super().__init__(message)


class DeliveryFailure(NotificationsError):
    """A single message could not be handed to the mail channel."""

    def __init__(self, recipient: str, reason: str) -> None:
        self.recipient = recipient
        self.reason = reason
        super().__init__(f"Failed to deliver to {recipient}: {reason}")
