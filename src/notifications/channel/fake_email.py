"""Fake email adapter — records sent emails for testing."""

import asyncio
from uuid import uuid4

from notifications.channel.email_port import EmailPort


class FakeEmailAdapter(EmailPort):
    """Email adapter that records messages in memory for test assertions."""

    def __init__(self, from_address: str = "notifications@brewery.local"):
        self.from_address = from_address
        self.sent_emails: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.failing_addresses: dict[str, str] = {}
        self.delay: float = 0.0

    def configure(self, should_succeed: bool = True, failure_reason: str = "Email delivery failed"):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def fail_for(self, address: str, reason: str = "Mailbox unavailable"):
        """Make deliveries to one address fail while others succeed."""
        self.failing_addresses[address] = reason

    async def send(self, to: str, subject: str, body: str) -> dict:
        if self.delay:
            await asyncio.sleep(self.delay)

        if not self.should_succeed:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failure_reason,
            }
        if to in self.failing_addresses:
            return {
                "message_id": None,
                "status": "failed",
                "error": self.failing_addresses[to],
            }

        message_id = f"email-{uuid4().hex[:12]}"
        record = {
            "message_id": message_id,
            "from": self.from_address,
            "to": to,
            "subject": subject,
            "body": body,
        }
        self.sent_emails.append(record)

        return {"message_id": message_id, "status": "sent"}

    def reset(self):
        """Clear sent emails (useful between tests)."""
        self.sent_emails.clear()
        self.should_succeed = True
        self.failure_reason = "Email delivery failed"
        self.failing_addresses.clear()
        self.delay = 0.0
