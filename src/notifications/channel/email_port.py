"""Email channel port — abstract interface for email dispatch."""

from abc import ABC, abstractmethod


class EmailPort(ABC):
    """Abstract interface for email dispatch adapters."""

    from_address: str = ""

    @abstractmethod
    async def send(self, to: str, subject: str, body: str) -> dict:
        """Send a plain-text email message from ``from_address``.

        Returns:
            dict with keys: message_id, status ("sent" or "failed"), error (optional)

        Adapters may also raise; callers treat either as a failed delivery.
        """
        ...
