"""Session token domain service."""

import logfire

from desk.config import AuthSettings
from desk.domain.error import TokenIssuanceError
from desk.domain.value import CommunityId, UserUUID
from desk.util.jwt import JWTError, SessionPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for session token operations."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def issue(self, user_uuid: UserUUID, community_id: CommunityId) -> tuple[str, int]:
        """Issue a session token bound to a user and its community.

        Args:
            user_uuid: User UUID
            community_id: Community the user belongs to

        Returns:
            Tuple of (token, lifetime in seconds)

        Raises:
            TokenIssuanceError: If signing fails
        """
        with logfire.span("jwt_service.issue", user_uuid=str(user_uuid)):
            try:
                token, expire_seconds = create_token(
                    str(user_uuid), community_id, self.auth_settings
                )
            except JWTError as e:
                logfire.error(
                    "Session token signing failed",
                    user_uuid=str(user_uuid),
                    error=str(e),
                )
                raise TokenIssuanceError(str(e)) from e

            logfire.info(
                "Session token issued",
                user_uuid=str(user_uuid),
                community_id=community_id,
                expire_seconds=expire_seconds,
            )
            return token, expire_seconds

    def verify_token(self, token: str) -> SessionPayload:
        """Verify a session token and extract its payload.

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.error("Session token verification failed", error=str(e))
                raise
            logfire.info("Session token verified", user_uuid=payload.user_uuid)
            return payload
