"""Community routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status

from desk.application.usecase.community import CommunityInfo, CreateCommunityUseCase
from desk.application.usecase.community.create_community import (
    CreateCommunityResponse,
)
from desk.domain.error import DomainError
from desk.interface.error import to_http_exception

router = APIRouter(prefix="/community", tags=["community"], route_class=DishkaRoute)


@router.post(
    "/create",
    response_model=CreateCommunityResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_community(
    request: CommunityInfo,
    create_community_use_case: FromDishka[CreateCommunityUseCase],
) -> CreateCommunityResponse:
    """Create a community."""
    try:
        return await create_community_use_case.execute(request)
    except DomainError as e:
        raise to_http_exception(e)
