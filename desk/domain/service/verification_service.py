"""Email verification domain service."""

import hmac
import secrets
from datetime import datetime, timedelta, timezone

import logfire

from desk.config import VerificationSettings
from desk.domain.model.verification_code import VerificationCode
from desk.domain.repository import VerificationCodeRepository

from .base import Service


class MailSender:
    """Outbound mail interface."""

    async def send(self, to: str, subject: str, body: str) -> None:
        """Send a plain-text message.

        Args:
            to: Recipient address
            subject: Message subject
            body: Plain-text body
        """
        raise NotImplementedError


class VerificationService(Service):
    """Issues and checks one-time email verification codes."""

    def __init__(
        self,
        code_repository: VerificationCodeRepository,
        mail_sender: MailSender,
        settings: VerificationSettings,
    ) -> None:
        """Initialize verification service.

        Args:
            code_repository: Verification code repository
            mail_sender: Mail sender used to deliver codes
            settings: Code length and lifetime
        """
        self.code_repository = code_repository
        self.mail_sender = mail_sender
        self.settings = settings

    def generate_code(self) -> str:
        """Generate a random numeric code."""
        return "".join(
            secrets.choice("0123456789") for _ in range(self.settings.code_length)
        )

    async def send_code(self, email: str) -> VerificationCode:
        """Create a fresh code for an email and mail it.

        Any previous code for the same address is replaced.

        Args:
            email: Recipient address

        Returns:
            The stored code
        """
        with logfire.span("verification_service.send_code", email=email):
            code = VerificationCode(
                email=email,
                code=self.generate_code(),
                expires_at=datetime.now(timezone.utc)
                + timedelta(minutes=self.settings.code_ttl_minutes),
            )
            saved = await self.code_repository.save(code)

            await self.mail_sender.send(
                to=email,
                subject="Your verification code",
                body=(
                    f"Your verification code is {saved.code}. "
                    f"It expires in {self.settings.code_ttl_minutes} minutes."
                ),
            )
            logfire.info("Verification code sent", email=email)
            return saved

    async def check_code(self, email: str, code: str) -> bool:
        """Check a code against the one issued for an email.

        A code stays valid until it expires or a new one is sent.

        Args:
            email: Email the code was sent to
            code: Code supplied by the user

        Returns:
            True if the code is valid
        """
        with logfire.span("verification_service.check_code", email=email):
            stored = await self.code_repository.find_by_email(email)
            if stored is None:
                logfire.warn("No verification code issued", email=email)
                return False

            if stored.is_expired():
                logfire.warn("Verification code expired", email=email)
                await self.code_repository.delete_by_email(email)
                return False

            if not hmac.compare_digest(stored.code.encode(), code.encode()):
                logfire.warn("Verification code mismatch", email=email)
                return False

            logfire.info("Verification code accepted", email=email)
            return True
