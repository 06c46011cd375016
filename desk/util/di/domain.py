"""Domain layer DI providers."""

from dishka import Scope, provide

from desk.adapter.openim.client import OpenIMClient
from desk.config import AuthSettings, IdentitySettings, VerificationSettings
from desk.domain.repository import (
    CommunityRepository,
    UserRepository,
    VerificationCodeRepository,
)
from desk.domain.service import (
    CommunityService,
    IdentityService,
    JWTService,
    MailSender,
    PasswordService,
    UserService,
    VerificationService,
)
from desk.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_password_service(self, auth_settings: AuthSettings) -> PasswordService:
        """Provide password hashing service."""
        return PasswordService(rounds=auth_settings.bcrypt_rounds)

    @provide(scope=Scope.APP)
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide session token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_identity_service(
        self, openim_client: OpenIMClient, identity_settings: IdentitySettings
    ) -> IdentityService:
        """Provide identity domain service backed by OpenIM."""
        return IdentityService(client=openim_client, settings=identity_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_community_service(
        self, community_repository: CommunityRepository
    ) -> CommunityService:
        """Provide community domain service."""
        return CommunityService(community_repository=community_repository)

    @provide
    def get_verification_service(
        self,
        code_repository: VerificationCodeRepository,
        mail_sender: MailSender,
        verification_settings: VerificationSettings,
    ) -> VerificationService:
        """Provide email verification domain service."""
        return VerificationService(
            code_repository=code_repository,
            mail_sender=mail_sender,
            settings=verification_settings,
        )
