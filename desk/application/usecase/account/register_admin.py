"""Register administrator use case."""

import logfire
from pydantic import BaseModel

from desk.application.usecase.account.common import RegisterResponse, UserInfo
from desk.application.usecase.account.provisioning import AccountProvisioning
from desk.application.usecase.community import CommunityInfo
from desk.domain.error import (
    CommunityCreationError,
    DomainError,
    InvalidCodeError,
)
from desk.domain.model import UserAccount
from desk.domain.service import (
    CommunityService,
    PasswordService,
    UserService,
    VerificationService,
)


class RegisterAdminRequest(BaseModel):
    """Administrator registration request."""

    code: str  # Verification code mailed to user_info.email
    community_info: CommunityInfo
    user_info: UserInfo


class RegisterAdminUseCase:
    """Use case for onboarding an administrator together with its community."""

    def __init__(
        self,
        verification_service: VerificationService,
        community_service: CommunityService,
        user_service: UserService,
        password_service: PasswordService,
        provisioning: AccountProvisioning,
    ) -> None:
        """Initialize register admin use case.

        Args:
            verification_service: Email verification domain service
            community_service: Community domain service
            user_service: User domain service
            password_service: Password hashing domain service
            provisioning: Local-then-remote provisioning workflow
        """
        self.verification_service = verification_service
        self.community_service = community_service
        self.user_service = user_service
        self.password_service = password_service
        self.provisioning = provisioning

    async def execute(self, request: RegisterAdminRequest) -> RegisterResponse:
        """Execute administrator registration.

        Steps:
        1. Check the verification code for the admin email
        2. Create the community
        3. Provision the admin account (local row, then identity service)

        Args:
            request: Registration request

        Returns:
            UUID and row id of the new administrator

        Raises:
            InvalidCodeError: If the code is absent, expired or wrong
            CommunityCreationError: If the community cannot be created
            PersistenceError: If the local store rejects the account
            RemoteRegistrationError: If the identity service registration fails
        """
        user_info = request.user_info

        with logfire.span("register_admin", email=user_info.email):
            # Step 1: Check code before any write
            if not await self.verification_service.check_code(
                user_info.email, request.code
            ):
                raise InvalidCodeError(user_info.email)

            # Step 2: Create community
            community_info = request.community_info
            try:
                community = await self.community_service.create(
                    name=community_info.name,
                    email=community_info.email,
                    avatar=community_info.avatar or "",
                    description=community_info.description or "",
                )
            except DomainError as e:
                logfire.warn(
                    "Community creation failed",
                    name=community_info.name,
                    error=str(e),
                )
                raise CommunityCreationError(str(e)) from e

            # Step 3: Create admin
            admin = UserAccount(
                uuid=self.user_service.new_uuid(),
                email=user_info.email,
                nickname=user_info.nickname,
                avatar=user_info.avatar or "",
                description=user_info.description or "",
                is_enable=True,
                is_admin=True,
                password=self.password_service.hash(user_info.password),
                community_id=community.id,
            )
            stored = await self.provisioning.run(admin)

            return RegisterResponse(uuid=str(stored.uuid), id=stored.id)
