"""Domain model entities for desk."""

from desk.domain.model.community import Community
from desk.domain.model.user import UserAccount
from desk.domain.model.verification_code import VerificationCode

__all__ = [
    "UserAccount",
    "Community",
    "VerificationCode",
]
