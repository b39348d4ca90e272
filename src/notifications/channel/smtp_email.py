"""SMTP email adapter — delivers through an authenticated SMTP relay (STARTTLS)."""

from email.message import EmailMessage
from email.utils import make_msgid

import aiosmtplib
import structlog

from notifications.channel.email_port import EmailPort
from notifications.exceptions import DeliveryFailure

logger = structlog.get_logger(__name__)


class SmtpEmailAdapter(EmailPort):
    """Sends each message over its own SMTP session.

    Sessions are not shared, so concurrent sends never contend for one
    connection.
    """

    def __init__(
        self,
        host: str,
        port: int,
        username: str,
        password: str,
        from_address: str | None = None,
        timeout: float = 30.0,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.from_address = from_address or username
        self.timeout = timeout

    def _build_message(self, to: str, subject: str, body: str) -> EmailMessage:
        message = EmailMessage()
        message["From"] = self.from_address
        message["To"] = to
        message["Subject"] = subject
        message["Message-ID"] = make_msgid()
        message.set_content(body)
        return message

    async def send(self, to: str, subject: str, body: str) -> dict:
        message = self._build_message(to, subject, body)
        try:
            await aiosmtplib.send(
                message,
                hostname=self.host,
                port=self.port,
                username=self.username or None,
                password=self.password or None,
                start_tls=True,
                timeout=self.timeout,
            )
        except aiosmtplib.SMTPException as exc:
            raise DeliveryFailure(to, str(exc)) from exc

        logger.debug("Email handed to SMTP relay", to=to, host=self.host)
        return {"message_id": message["Message-ID"], "status": "sent"}
