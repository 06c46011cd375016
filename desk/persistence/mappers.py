"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from desk.domain.model import Community, UserAccount, VerificationCode
from desk.domain.value import CommunityId, UserId, UserUUID


def row_to_user(row: Dict[str, Any]) -> UserAccount:
    """Convert database row to UserAccount domain model."""
    return UserAccount(
        id=UserId(row["id"]),
        uuid=UserUUID(UUID(row["uuid"]) if isinstance(row["uuid"], str) else row["uuid"]),
        email=row["email"],
        nickname=row["nickname"],
        avatar=row.get("avatar") or "",
        description=row.get("description") or "",
        is_enable=row["is_enable"],
        is_admin=row["is_admin"],
        password=row["password"],
        community_id=CommunityId(row["community_id"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: UserAccount) -> Dict[str, Any]:
    """Convert UserAccount to an insert dict; the row id is left to the store."""
    return user.model_dump(exclude={"id"})


def row_to_community(row: Dict[str, Any]) -> Community:
    """Convert database row to Community domain model."""
    return Community(
        id=CommunityId(row["id"]),
        uuid=row["uuid"],
        name=row["name"],
        email=row["email"],
        avatar=row.get("avatar") or "",
        description=row.get("description") or "",
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def community_to_dict(community: Community) -> Dict[str, Any]:
    """Convert Community to an insert dict; the row id is left to the store."""
    return community.model_dump(exclude={"id"})


def row_to_verification_code(row: Dict[str, Any]) -> VerificationCode:
    """Convert database row to VerificationCode domain model."""
    return VerificationCode(
        email=row["email"],
        code=row["code"],
        expires_at=row["expires_at"],
    )
