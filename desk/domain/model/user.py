"""User account entity.

Administrators and staff share one table; ``is_admin`` tells them apart.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from desk.domain.model.common import DomainModel
from desk.domain.value import CommunityId, UserId, UserUUID


class UserAccount(DomainModel):
    """Local user record mirrored to the identity service by ``uuid``."""

    id: Optional[UserId] = None  # Assigned by the store
    uuid: UserUUID
    email: str
    nickname: str
    avatar: str = ""
    description: str = ""
    is_enable: bool = True
    is_admin: bool = False
    password: str  # bcrypt hash, never plaintext
    community_id: CommunityId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
