"""Login routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from desk.application.usecase.auth import LoginWithAccountUseCase
from desk.application.usecase.auth.login import LoginRequest, LoginResponse
from desk.domain.error import DomainError
from desk.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/login", tags=["login"], route_class=DishkaRoute)


@router.post("/account", response_model=LoginResponse)
async def login_with_account(
    request: LoginRequest,
    login_use_case: FromDishka[LoginWithAccountUseCase],
) -> LoginResponse:
    """Log in with email and password.

    Returns the session token and the IM token together.

    Raises:
        HTTPException: 401 bad credentials, 502 identity service failure
    """
    try:
        return await login_use_case.execute(request)
    except DomainError as e:
        logger.info(f"Login failed for {request.email}: {type(e).__name__}")
        raise to_http_exception(e, login=True)
