"""Registration routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status

from desk.adapter.error import ProviderError
from desk.application.usecase.account import (
    RegisterAdminRequest,
    RegisterAdminUseCase,
    RegisterResponse,
    RegisterStaffRequest,
    RegisterStaffUseCase,
)
from desk.application.usecase.verification import SendCodeUseCase
from desk.application.usecase.verification.send_code import (
    SendCodeRequest,
    SendCodeResponse,
)
from desk.domain.error import DomainError
from desk.interface.error import to_http_exception

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/register", tags=["register"], route_class=DishkaRoute)


@router.post("/email/code", response_model=SendCodeResponse)
async def send_code(
    request: SendCodeRequest,
    send_code_use_case: FromDishka[SendCodeUseCase],
) -> SendCodeResponse:
    """Mail a verification code needed for administrator registration.

    Raises:
        HTTPException: 502 if the mail relay fails
    """
    try:
        return await send_code_use_case.execute(request)
    except ProviderError as e:
        logger.error(f"Verification mail to {request.email} failed ({e.provider}): {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Verification code could not be sent",
        )


@router.post(
    "/admin", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register_admin(
    request: RegisterAdminRequest,
    register_admin_use_case: FromDishka[RegisterAdminUseCase],
) -> RegisterResponse:
    """Register an administrator and its community.

    Raises:
        HTTPException: 400 bad code, 409 duplicate account,
            422 community failure, 502 identity service failure
    """
    try:
        return await register_admin_use_case.execute(request)
    except DomainError as e:
        logger.warning(f"Admin registration failed for {request.user_info.email}: {e}")
        raise to_http_exception(e)


@router.post(
    "/staff", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register_staff(
    request: RegisterStaffRequest,
    register_staff_use_case: FromDishka[RegisterStaffUseCase],
) -> RegisterResponse:
    """Register a staff member in an existing community.

    Raises:
        HTTPException: 409 duplicate account, 502 identity service failure
    """
    try:
        return await register_staff_use_case.execute(request)
    except DomainError as e:
        logger.warning(f"Staff registration failed for {request.user_info.email}: {e}")
        raise to_http_exception(e)
