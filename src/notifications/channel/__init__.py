"""Email channel factory — builds the mail adapter the application runs with.

Uses the fake adapter by default; EMAIL_ADAPTER=smtp selects the SMTP relay
configured through the EMAIL_* / SMTP_* settings.
"""

from notifications.channel.email_port import EmailPort
from notifications.config import Settings

DEFAULT_FROM_ADDRESS = "notifications@brewery.local"


def build_email_channel(settings: Settings) -> EmailPort:
    """Return a new email adapter configured from ``settings``."""
    if settings.email_adapter == "fake":
        from notifications.channel.fake_email import FakeEmailAdapter

        return FakeEmailAdapter(from_address=settings.email_user or DEFAULT_FROM_ADDRESS)

    if settings.email_adapter == "smtp":
        from notifications.channel.smtp_email import SmtpEmailAdapter

        if not settings.email_user.strip():
            raise ValueError("EMAIL_USER is required for the SMTP email adapter")
        return SmtpEmailAdapter(
            host=settings.smtp_host,
            port=settings.smtp_port,
            username=settings.email_user,
            password=settings.email_pass,
            timeout=settings.send_timeout_seconds,
        )

    raise ValueError(f"Unknown email adapter: {settings.email_adapter}")
