"""Unit tests for mail senders."""

import smtplib
from unittest.mock import MagicMock, patch

import pytest

from desk.adapter.mail.sender import MailError, MockMailSender, SMTPMailSender
from desk.config import MailSettings


class TestSMTPMailSender:
    """Tests for SMTPMailSender."""

    @pytest.mark.asyncio
    async def test_sends_message_through_relay(self):
        """Message should be addressed from the configured sender."""
        # Arrange
        sender = SMTPMailSender(MailSettings(host="smtp.test", port=2525))

        with patch("desk.adapter.mail.sender.smtplib.SMTP") as smtp_cls:
            conn = smtp_cls.return_value.__enter__.return_value

            # Act
            await sender.send("owner@acme.com", "Hello", "Body text")

        # Assert
        smtp_cls.assert_called_once_with(host="smtp.test", port=2525)
        message = conn.send_message.call_args.args[0]
        assert message["From"] == "no-reply@desk.local"
        assert message["To"] == "owner@acme.com"
        assert message["Subject"] == "Hello"
        assert "Body text" in message.get_content()
        conn.starttls.assert_not_called()
        conn.login.assert_not_called()

    @pytest.mark.asyncio
    async def test_uses_tls_and_credentials_when_configured(self):
        # Arrange
        sender = SMTPMailSender(
            MailSettings(use_tls=True, username="mailer", password="pw")
        )

        with patch("desk.adapter.mail.sender.smtplib.SMTP") as smtp_cls:
            conn = smtp_cls.return_value.__enter__.return_value

            # Act
            await sender.send("owner@acme.com", "Hello", "Body")

        # Assert
        conn.starttls.assert_called_once()
        conn.login.assert_called_once_with("mailer", "pw")

    @pytest.mark.asyncio
    async def test_relay_failure_raises_mail_error(self):
        # Arrange
        sender = SMTPMailSender(MailSettings())

        with patch("desk.adapter.mail.sender.smtplib.SMTP") as smtp_cls:
            conn = MagicMock()
            conn.send_message.side_effect = smtplib.SMTPRecipientsRefused({})
            smtp_cls.return_value.__enter__.return_value = conn

            # Act & Assert
            with pytest.raises(MailError):
                await sender.send("owner@acme.com", "Hello", "Body")


class TestMockMailSender:
    """Tests for MockMailSender."""

    @pytest.mark.asyncio
    async def test_records_messages(self):
        sender = MockMailSender()

        await sender.send("a@x.com", "Subject", "Body")

        assert sender.outbox == [("a@x.com", "Subject", "Body")]
