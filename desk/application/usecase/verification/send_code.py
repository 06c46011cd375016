"""Send verification code use case."""

from datetime import datetime

from pydantic import BaseModel, Field

from desk.domain.service import VerificationService


class SendCodeRequest(BaseModel):
    """Request a verification code for an email address."""

    email: str = Field(max_length=255)


class SendCodeResponse(BaseModel):
    """Send code response. The code itself only travels by mail."""

    email: str
    expires_at: datetime


class SendCodeUseCase:
    """Use case for mailing a verification code before admin registration."""

    def __init__(self, verification_service: VerificationService) -> None:
        """Initialize send code use case.

        Args:
            verification_service: Email verification domain service
        """
        self.verification_service = verification_service

    async def execute(self, request: SendCodeRequest) -> SendCodeResponse:
        """Issue and mail a fresh code."""
        code = await self.verification_service.send_code(request.email)
        return SendCodeResponse(email=code.email, expires_at=code.expires_at)
