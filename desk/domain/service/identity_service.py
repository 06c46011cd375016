"""Remote identity domain service."""

import logfire

from desk.config import IdentitySettings
from desk.domain.error import IdentityServiceError
from desk.domain.value import (
    IdentityResponse,
    RemoteUser,
    TokenData,
    UserTokenResponse,
    UserUUID,
)

from .base import Service


class IdentityClientError(Exception):
    """Transport-level failure talking to the identity service."""

    pass


class IdentityClient:
    """Client interface for the remote identity service."""

    async def register_user(
        self, secret: str, users: list[RemoteUser]
    ) -> IdentityResponse:
        """Register users with the identity service.

        Args:
            secret: Shared admin secret
            users: Users to register

        Returns:
            Response envelope; a non-zero ``err_code`` means failure

        Raises:
            IdentityClientError: On network or protocol failure
        """
        raise NotImplementedError

    async def get_user_token(
        self, secret: str, user_id: str, platform_id: int
    ) -> UserTokenResponse:
        """Fetch an access token for a user on a platform.

        Args:
            secret: Shared admin secret
            user_id: Remote user id (the local user UUID)
            platform_id: Platform the token is bound to

        Returns:
            Response envelope with token data

        Raises:
            IdentityClientError: On network or protocol failure
        """
        raise NotImplementedError


class IdentityService(Service):
    """Mirrors local accounts into the identity service and fetches its tokens.

    Both transport failures and non-zero application codes surface as
    ``IdentityServiceError``.
    """

    def __init__(self, client: IdentityClient, settings: IdentitySettings) -> None:
        """Initialize identity service.

        Args:
            client: Identity service client
            settings: Identity service settings (secret, platform)
        """
        self.client = client
        self.settings = settings

    async def register(
        self, user_uuid: UserUUID, nickname: str, face_url: str = ""
    ) -> None:
        """Register a user remotely under its UUID.

        Raises:
            IdentityServiceError: If the call fails or is refused
        """
        with logfire.span("identity_service.register", user_uuid=str(user_uuid)):
            users = [
                RemoteUser(user_id=str(user_uuid), nickname=nickname, face_url=face_url)
            ]
            try:
                response = await self.client.register_user(self.settings.secret, users)
            except IdentityClientError as e:
                logfire.error(
                    "Identity registration call failed",
                    user_uuid=str(user_uuid),
                    error=str(e),
                )
                raise IdentityServiceError(str(e)) from e

            self._check(response, "registration", user_uuid)
            logfire.info("User registered remotely", user_uuid=str(user_uuid))

    async def get_user_token(self, user_uuid: UserUUID) -> TokenData:
        """Fetch an access token for the configured platform.

        Raises:
            IdentityServiceError: If the call fails or is refused
        """
        with logfire.span(
            "identity_service.get_user_token",
            user_uuid=str(user_uuid),
            platform_id=self.settings.platform_id,
        ):
            try:
                response = await self.client.get_user_token(
                    self.settings.secret, str(user_uuid), self.settings.platform_id
                )
            except IdentityClientError as e:
                logfire.error(
                    "Identity token call failed",
                    user_uuid=str(user_uuid),
                    error=str(e),
                )
                raise IdentityServiceError(str(e)) from e

            self._check(response, "token", user_uuid)

            data = response.data
            if data is None or not data.token or data.expire_time_seconds <= 0:
                logfire.error(
                    "Identity token response unusable",
                    user_uuid=str(user_uuid),
                    has_data=data is not None,
                )
                raise IdentityServiceError("identity service returned no usable token")

            logfire.info(
                "Remote token fetched",
                user_uuid=str(user_uuid),
                expire_time_seconds=data.expire_time_seconds,
            )
            return data

    @staticmethod
    def _check(response: IdentityResponse, call: str, user_uuid: UserUUID) -> None:
        """Raise if the response carries a non-zero application code."""
        if response.ok:
            return
        logfire.warn(
            f"Identity {call} refused",
            user_uuid=str(user_uuid),
            err_code=response.err_code,
            err_msg=response.err_msg,
        )
        raise IdentityServiceError(
            response.err_msg or f"identity service error {response.err_code}",
            err_code=response.err_code,
        )
