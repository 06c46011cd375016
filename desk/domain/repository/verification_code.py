"""Verification code repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from desk.domain.model.verification_code import VerificationCode


class VerificationCodeRepository(ABC):
    """Repository for email verification codes.

    At most one code is kept per email; saving replaces the previous one.
    """

    @abstractmethod
    async def save(self, code: VerificationCode) -> VerificationCode:
        """Store a code, replacing any previous code for the same email."""
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[VerificationCode]:
        """Find the current code for an email."""
        pass

    @abstractmethod
    async def delete_by_email(self, email: str) -> None:
        """Remove the code for an email."""
        pass
