"""Email verification code."""

from datetime import datetime, timezone

from desk.domain.model.common import DomainModel


class VerificationCode(DomainModel):
    """One-time code sent to an email address before admin registration."""

    email: str
    code: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the code is past its expiry."""
        return (now or datetime.now(timezone.utc)) >= self.expires_at
