"""In-memory repository implementations for testing."""

from .community import InMemoryCommunityRepository
from .user import InMemoryUserRepository
from .verification_code import InMemoryVerificationCodeRepository

__all__ = [
    "InMemoryCommunityRepository",
    "InMemoryUserRepository",
    "InMemoryVerificationCodeRepository",
]
