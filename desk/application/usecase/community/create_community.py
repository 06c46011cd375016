"""Create community use case."""

from pydantic import BaseModel, Field

from desk.domain.service import CommunityService


class CommunityInfo(BaseModel):
    """Community descriptor supplied by the caller."""

    name: str = Field(max_length=255)
    email: str = Field(max_length=255)
    avatar: str | None = None
    description: str | None = None


class CreateCommunityResponse(BaseModel):
    """Create community response."""

    id: int
    uuid: str


class CreateCommunityUseCase:
    """Use case for creating a standalone community."""

    def __init__(self, community_service: CommunityService) -> None:
        """Initialize create community use case.

        Args:
            community_service: Community domain service
        """
        self.community_service = community_service

    async def execute(self, request: CommunityInfo) -> CreateCommunityResponse:
        """Create the community.

        Raises:
            PersistenceError: If the store rejects the row
        """
        community = await self.community_service.create(
            name=request.name,
            email=request.email,
            avatar=request.avatar or "",
            description=request.description or "",
        )
        return CreateCommunityResponse(id=community.id, uuid=community.uuid)
