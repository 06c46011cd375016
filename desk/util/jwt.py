"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from desk.config import AuthSettings


class SessionPayload(BaseModel):
    """Session token payload."""

    user_uuid: str
    community_id: int
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_uuid: str, community_id: int, settings: AuthSettings
) -> tuple[str, int]:
    """Create a session token bound to a user and its community.

    Args:
        user_uuid: User UUID
        community_id: Community the user belongs to
        settings: Authentication settings

    Returns:
        Tuple of (encoded token, lifetime in seconds)

    Raises:
        JWTError: If the token cannot be signed
    """
    lifetime = timedelta(hours=settings.jwt_expiry_hours)
    expiry = datetime.now(timezone.utc) + lifetime

    payload = {
        "user_uuid": user_uuid,
        "community_id": community_id,
        "exp": expiry,
    }

    try:
        token = jwt.encode(
            payload, settings.jwt_secret, algorithm=settings.jwt_algorithm
        )
    except (jwt.PyJWTError, NotImplementedError, TypeError, ValueError) as e:
        raise JWTError(f"Cannot sign token: {e}")

    return token, int(lifetime.total_seconds())


def verify_token(token: str, settings: AuthSettings) -> SessionPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return SessionPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
