"""Community domain service."""

from uuid import uuid4

import logfire

from desk.domain.error import NotFoundError
from desk.domain.model import Community
from desk.domain.repository import CommunityRepository
from desk.domain.value import CommunityId

from .base import Service


class CommunityService(Service):
    """Domain service for community operations."""

    def __init__(self, community_repository: CommunityRepository) -> None:
        """Initialize community service.

        Args:
            community_repository: Community repository
        """
        self.community_repository = community_repository

    async def create(
        self, name: str, email: str, avatar: str = "", description: str = ""
    ) -> Community:
        """Create a community.

        Args:
            name: Community name
            email: Contact email
            avatar: Avatar URL
            description: Free-form description

        Returns:
            Stored community with its id

        Raises:
            PersistenceError: If the store rejects the row
        """
        with logfire.span("community_service.create", name=name):
            community = Community(
                uuid=str(uuid4()),
                name=name,
                email=email,
                avatar=avatar,
                description=description,
            )
            saved = await self.community_repository.create(community)
            logfire.info("Community created", community_id=saved.id, name=name)
            return saved

    async def get_by_id(self, community_id: CommunityId) -> Community:
        """Get community by id.

        Raises:
            NotFoundError: If community not found
        """
        with logfire.span("community_service.get_by_id", community_id=community_id):
            community = await self.community_repository.find_by_id(community_id)
            if not community:
                logfire.warn("Community not found", community_id=community_id)
                raise NotFoundError("Community", str(community_id))
            return community
