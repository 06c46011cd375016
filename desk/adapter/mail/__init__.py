"""Mail adapter."""

from .sender import MailError, MockMailSender, SMTPMailSender

__all__ = ["MailError", "MockMailSender", "SMTPMailSender"]
