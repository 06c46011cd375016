"""Register staff use case."""

import logfire
from pydantic import BaseModel

from desk.application.usecase.account.common import RegisterResponse, UserInfo
from desk.application.usecase.account.provisioning import AccountProvisioning
from desk.domain.model import UserAccount
from desk.domain.service import PasswordService, UserService
from desk.domain.value import CommunityId


class RegisterStaffRequest(BaseModel):
    """Staff registration request."""

    community_id: int  # Existing community, trusted as given
    user_info: UserInfo


class RegisterStaffUseCase:
    """Use case for adding a staff member to an existing community."""

    def __init__(
        self,
        user_service: UserService,
        password_service: PasswordService,
        provisioning: AccountProvisioning,
    ) -> None:
        """Initialize register staff use case.

        Args:
            user_service: User domain service
            password_service: Password hashing domain service
            provisioning: Local-then-remote provisioning workflow
        """
        self.user_service = user_service
        self.password_service = password_service
        self.provisioning = provisioning

    async def execute(self, request: RegisterStaffRequest) -> RegisterResponse:
        """Execute staff registration.

        Raises:
            PersistenceError: If the local store rejects the account
            RemoteRegistrationError: If the identity service registration fails
        """
        user_info = request.user_info

        with logfire.span(
            "register_staff",
            email=user_info.email,
            community_id=request.community_id,
        ):
            staff = UserAccount(
                uuid=self.user_service.new_uuid(),
                email=user_info.email,
                nickname=user_info.nickname,
                avatar=user_info.avatar or "",
                description=user_info.description or "",
                is_enable=True,
                is_admin=False,
                password=self.password_service.hash(user_info.password),
                community_id=CommunityId(request.community_id),
            )
            stored = await self.provisioning.run(staff)

            return RegisterResponse(uuid=str(stored.uuid), id=stored.id)
