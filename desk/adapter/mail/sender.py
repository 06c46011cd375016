"""Outbound mail adapter."""

import asyncio
import smtplib
from email.message import EmailMessage

import logfire

from desk.adapter.error import ProviderError
from desk.config import MailSettings
from desk.domain.service.verification_service import MailSender


class MailError(ProviderError):
    """Mail delivery error."""

    provider = "smtp"


class SMTPMailSender(MailSender):
    """Sends mail through an SMTP relay."""

    def __init__(self, settings: MailSettings) -> None:
        """Initialize SMTP sender.

        Args:
            settings: SMTP host, port, sender and credentials
        """
        self.settings = settings

    async def send(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text message.

        Raises:
            MailError: If the relay rejects the message or is unreachable
        """
        message = EmailMessage()
        message["From"] = self.settings.sender
        message["To"] = to
        message["Subject"] = subject
        message.set_content(body)

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as e:
            logfire.error("Mail delivery failed", to=to, error=str(e))
            raise MailError(f"Cannot send mail to {to}: {e}")

        logfire.info("Mail sent", to=to, subject=subject)

    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(host=self.settings.host, port=self.settings.port) as conn:
            if self.settings.use_tls:
                conn.starttls()
            if self.settings.username and self.settings.password:
                conn.login(self.settings.username, self.settings.password)
            conn.send_message(message)


class MockMailSender(MailSender):
    """Mock sender that keeps messages in memory."""

    def __init__(self) -> None:
        self.outbox: list[tuple[str, str, str]] = []

    async def send(self, to: str, subject: str, body: str) -> None:
        """Record the message."""
        self.outbox.append((to, subject, body))
