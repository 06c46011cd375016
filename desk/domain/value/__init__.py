"""Domain value objects for desk."""

from desk.domain.value.identifiers import CommunityId, UserId, UserUUID
from desk.domain.value.types import (
    IdentityResponse,
    RemoteUser,
    TokenData,
    UserTokenResponse,
)

__all__ = [
    # Identifiers
    "UserUUID",
    "UserId",
    "CommunityId",
    # Types
    "RemoteUser",
    "IdentityResponse",
    "TokenData",
    "UserTokenResponse",
]
