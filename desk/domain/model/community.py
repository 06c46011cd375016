"""Community (tenant) entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from desk.domain.model.common import DomainModel
from desk.domain.value import CommunityId


class Community(DomainModel):
    """Tenant grouping an administrator and its staff."""

    id: Optional[CommunityId] = None  # Assigned by the store
    uuid: str
    name: str
    email: str
    avatar: str = ""
    description: str = ""
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
