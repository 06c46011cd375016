"""In-memory verification code repository for testing."""

from typing import Optional

from desk.domain.model import VerificationCode
from desk.domain.repository import VerificationCodeRepository


class InMemoryVerificationCodeRepository(VerificationCodeRepository):
    """In-memory implementation of VerificationCodeRepository for testing."""

    def __init__(self) -> None:
        self._codes: dict[str, VerificationCode] = {}

    async def save(self, code: VerificationCode) -> VerificationCode:
        """Store a code, replacing any previous one for the email."""
        self._codes[code.email] = code
        return code

    async def find_by_email(self, email: str) -> Optional[VerificationCode]:
        """Find the current code for an email."""
        return self._codes.get(email)

    async def delete_by_email(self, email: str) -> None:
        """Remove the code for an email."""
        self._codes.pop(email, None)
