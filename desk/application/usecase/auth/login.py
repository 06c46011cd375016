"""Account login use case."""

import logfire
from pydantic import BaseModel

from desk.domain.error import (
    IdentityServiceError,
    InvalidCredentialsError,
    NotFoundError,
    RemoteAuthError,
)
from desk.domain.service import (
    IdentityService,
    JWTService,
    PasswordService,
    UserService,
)


class LoginRequest(BaseModel):
    """Login with email and password."""

    email: str
    password: str


class TokenInfo(BaseModel):
    """A token and its lifetime."""

    token: str
    expire_time_seconds: int


class LoginResponse(BaseModel):
    """Login response carrying both the session and the IM token."""

    uuid: str
    kf_token: TokenInfo
    im_token: TokenInfo


class LoginWithAccountUseCase:
    """Use case for email/password login."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        identity_service: IdentityService,
    ) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            password_service: Password hashing domain service
            jwt_service: Session token domain service
            identity_service: Identity domain service
        """
        self.user_service = user_service
        self.password_service = password_service
        self.jwt_service = jwt_service
        self.identity_service = identity_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login.

        Steps:
        1. Look up the account by email
        2. Verify the password
        3. Issue a session token bound to the user and its community
        4. Fetch an access token from the identity service

        Nothing is returned unless every step succeeds.

        Args:
            request: Login credentials

        Returns:
            User UUID with both tokens

        Raises:
            NotFoundError: If no account owns the email
            InvalidCredentialsError: If the password does not match
            TokenIssuanceError: If the session token cannot be signed
            RemoteAuthError: If the identity service cannot issue a token
        """
        with logfire.span("login_with_account", email=request.email):
            # Step 1: Check user
            try:
                user = await self.user_service.get_by_email(request.email)
            except NotFoundError:
                self.password_service.compare_dummy(request.password)
                raise

            # Step 2: Check password
            if not self.password_service.compare(request.password, user.password):
                logfire.warn("Password mismatch", user_uuid=str(user.uuid))
                raise InvalidCredentialsError()

            # Step 3: Session token
            kf_token, kf_expire_seconds = self.jwt_service.issue(
                user.uuid, user.community_id
            )

            # Step 4: IM token
            try:
                im_token = await self.identity_service.get_user_token(user.uuid)
            except IdentityServiceError as e:
                raise RemoteAuthError(str(e)) from e

            logfire.info("User logged in", user_uuid=str(user.uuid))

            return LoginResponse(
                uuid=str(user.uuid),
                kf_token=TokenInfo(
                    token=kf_token, expire_time_seconds=kf_expire_seconds
                ),
                im_token=TokenInfo(
                    token=im_token.token,
                    expire_time_seconds=im_token.expire_time_seconds,
                ),
            )
