"""Notification dispatcher — concurrent per-recipient delivery via the email channel.

Every recipient in a batch is sent to concurrently. A failure for one
recipient (adapter error, failed status, timeout, bad template context) is
recorded against that recipient only; the rest of the batch carries on.
The outcome always holds exactly one result per recipient.
"""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass, field

import structlog

from notifications.channel.email_port import EmailPort
from notifications.exceptions import DeliveryFailure
from notifications.notification.notification import Message
from notifications.notification.recipients import Recipient, RecipientSet

logger = structlog.get_logger(__name__)

MessageBuilder = Callable[[Recipient], Message]


@dataclass(frozen=True)
class DeliveryResult:
    recipient: str
    success: bool
    address: str | None = None
    message_id: str | None = None
    failure_reason: str | None = None


@dataclass
class DispatchOutcome:
    results: list[DeliveryResult] = field(default_factory=list)

    @property
    def attempted(self) -> int:
        return len(self.results)

    @property
    def succeeded(self) -> int:
        return sum(1 for result in self.results if result.success)

    @property
    def failures(self) -> list[tuple[str, str]]:
        """(recipient key, reason) for every failed delivery."""
        return [(result.recipient, result.failure_reason) for result in self.results if not result.success]

    def result_for(self, recipient: str) -> DeliveryResult:
        for result in self.results:
            if result.recipient == recipient:
                return result
        raise KeyError(recipient)


class Dispatcher:
    """Sends one message per recipient through an email adapter."""

    def __init__(self, channel: EmailPort, send_timeout: float = 30.0) -> None:
        self.channel = channel
        self.send_timeout = send_timeout

    async def dispatch(self, recipients: RecipientSet, build_message: MessageBuilder) -> DispatchOutcome:
        """Deliver to every recipient concurrently and collect one result each."""
        recipients = list(recipients)
        if not recipients:
            return DispatchOutcome()

        # _deliver never raises, so one failure cannot cancel its siblings
        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(self._deliver(recipient, build_message)) for recipient in recipients]

        outcome = DispatchOutcome(results=[task.result() for task in tasks])
        logger.info(
            "Dispatch complete",
            attempted=outcome.attempted,
            succeeded=outcome.succeeded,
            failed=len(outcome.failures),
        )
        return outcome

    async def _deliver(self, recipient: Recipient, build_message: MessageBuilder) -> DeliveryResult:
        address = None
        try:
            message = build_message(recipient)
            address = message.to
            async with asyncio.timeout(self.send_timeout):
                result = await self.channel.send(to=message.to, subject=message.subject, body=message.body)
        except TimeoutError:
            reason = f"Delivery timed out after {self.send_timeout}s"
        except DeliveryFailure as exc:
            reason = exc.reason
        except Exception as exc:
            logger.exception("Unexpected error delivering notification", recipient=recipient.key)
            reason = str(exc) or type(exc).__name__
        else:
            if result.get("status") == "sent":
                return DeliveryResult(
                    recipient=recipient.key,
                    success=True,
                    address=address,
                    message_id=result.get("message_id"),
                )
            reason = result.get("error") or "Unknown dispatch error"

        logger.warning("Notification delivery failed", recipient=recipient.key, address=address, reason=reason)
        return DeliveryResult(recipient=recipient.key, success=False, address=address, failure_reason=reason)
