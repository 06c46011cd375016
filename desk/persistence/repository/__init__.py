"""PostgreSQL repository implementations."""

from desk.persistence.repository.community import PostgresCommunityRepository
from desk.persistence.repository.user import PostgresUserRepository
from desk.persistence.repository.verification_code import (
    PostgresVerificationCodeRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresCommunityRepository",
    "PostgresVerificationCodeRepository",
]
