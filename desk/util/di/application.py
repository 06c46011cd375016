"""Application layer DI providers."""

from dishka import Scope, provide

from desk.application.usecase.account import (
    AccountProvisioning,
    RegisterAdminUseCase,
    RegisterStaffUseCase,
)
from desk.application.usecase.auth import LoginWithAccountUseCase
from desk.application.usecase.community import CreateCommunityUseCase
from desk.application.usecase.verification import SendCodeUseCase
from desk.domain.service import (
    CommunityService,
    IdentityService,
    JWTService,
    PasswordService,
    UserService,
    VerificationService,
)
from desk.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Account use cases
    @provide(scope=Scope.REQUEST)
    def get_account_provisioning(
        self, user_service: UserService, identity_service: IdentityService
    ) -> AccountProvisioning:
        """Provide provisioning workflow."""
        return AccountProvisioning(
            user_service=user_service, identity_service=identity_service
        )

    @provide(scope=Scope.REQUEST)
    def get_register_admin_use_case(
        self,
        verification_service: VerificationService,
        community_service: CommunityService,
        user_service: UserService,
        password_service: PasswordService,
        provisioning: AccountProvisioning,
    ) -> RegisterAdminUseCase:
        """Provide register admin use case."""
        return RegisterAdminUseCase(
            verification_service=verification_service,
            community_service=community_service,
            user_service=user_service,
            password_service=password_service,
            provisioning=provisioning,
        )

    @provide(scope=Scope.REQUEST)
    def get_register_staff_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        provisioning: AccountProvisioning,
    ) -> RegisterStaffUseCase:
        """Provide register staff use case."""
        return RegisterStaffUseCase(
            user_service=user_service,
            password_service=password_service,
            provisioning=provisioning,
        )

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_login_use_case(
        self,
        user_service: UserService,
        password_service: PasswordService,
        jwt_service: JWTService,
        identity_service: IdentityService,
    ) -> LoginWithAccountUseCase:
        """Provide login use case."""
        return LoginWithAccountUseCase(
            user_service=user_service,
            password_service=password_service,
            jwt_service=jwt_service,
            identity_service=identity_service,
        )

    # Community use cases
    @provide(scope=Scope.REQUEST)
    def get_create_community_use_case(
        self, community_service: CommunityService
    ) -> CreateCommunityUseCase:
        """Provide create community use case."""
        return CreateCommunityUseCase(community_service=community_service)

    # Verification use cases
    @provide(scope=Scope.REQUEST)
    def get_send_code_use_case(
        self, verification_service: VerificationService
    ) -> SendCodeUseCase:
        """Provide send code use case."""
        return SendCodeUseCase(verification_service=verification_service)
