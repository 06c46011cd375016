"""In-memory community repository for testing."""

from itertools import count
from typing import Optional

from desk.domain.model import Community
from desk.domain.repository import CommunityRepository
from desk.domain.value import CommunityId


class InMemoryCommunityRepository(CommunityRepository):
    """In-memory implementation of CommunityRepository for testing."""

    def __init__(self) -> None:
        self._communities: dict[CommunityId, Community] = {}
        self._ids = count(1)

    async def create(self, community: Community) -> Community:
        """Insert a community, assigning the next row id."""
        stored = community.model_copy(update={"id": CommunityId(next(self._ids))})
        self._communities[stored.id] = stored
        return stored

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by row id."""
        return self._communities.get(community_id)
