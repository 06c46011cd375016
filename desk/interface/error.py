"""Interface layer error mapping."""

from fastapi import HTTPException, status

from desk.domain.error import (
    CommunityCreationError,
    DomainError,
    InvalidCodeError,
    InvalidCredentialsError,
    NotFoundError,
    PersistenceError,
    RemoteAuthError,
    RemoteRegistrationError,
    TokenIssuanceError,
)

# Unknown email and wrong password share one answer so accounts can't be enumerated
INVALID_LOGIN_DETAIL = "Invalid email or password"

_STATUS_BY_ERROR: list[tuple[type[DomainError], int]] = [
    (InvalidCodeError, status.HTTP_400_BAD_REQUEST),
    (CommunityCreationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (PersistenceError, status.HTTP_409_CONFLICT),
    (RemoteRegistrationError, status.HTTP_502_BAD_GATEWAY),
    (RemoteAuthError, status.HTTP_502_BAD_GATEWAY),
    (TokenIssuanceError, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
]


def to_http_exception(error: DomainError, login: bool = False) -> HTTPException:
    """Translate a domain error into an HTTP error.

    Args:
        error: Domain error raised by a use case
        login: Whether the error comes from a login attempt

    Returns:
        HTTPException carrying the status and detail to return
    """
    if login and isinstance(error, (NotFoundError, InvalidCredentialsError)):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=INVALID_LOGIN_DETAIL
        )

    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            return HTTPException(status_code=status_code, detail=str(error))

    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error)
    )
