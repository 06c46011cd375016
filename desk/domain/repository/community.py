"""Community repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from desk.domain.model.community import Community
from desk.domain.value import CommunityId


class CommunityRepository(ABC):
    """Repository for Community entities."""

    @abstractmethod
    async def create(self, community: Community) -> Community:
        """Insert a new community.

        Args:
            community: The community to insert

        Returns:
            The stored community with its row id assigned

        Raises:
            PersistenceError: If the store rejects the row
        """
        pass

    @abstractmethod
    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by row id.

        Args:
            community_id: The community's row id

        Returns:
            The community if found, None otherwise
        """
        pass
