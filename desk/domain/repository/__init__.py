"""Repository interfaces for the desk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from desk.domain.repository.community import CommunityRepository
from desk.domain.repository.user import UserRepository
from desk.domain.repository.verification_code import VerificationCodeRepository

__all__ = [
    "UserRepository",
    "CommunityRepository",
    "VerificationCodeRepository",
]
