"""Unit tests for LoginWithAccountUseCase."""

from unittest.mock import AsyncMock, patch

from dishka import AsyncContainer
import pytest

from desk.adapter.openim.client import OpenIMClient
from desk.application.usecase.account import RegisterStaffRequest, RegisterStaffUseCase
from desk.application.usecase.auth import LoginWithAccountUseCase
from desk.application.usecase.auth.login import LoginRequest
from desk.domain.error import (
    InvalidCredentialsError,
    NotFoundError,
    RemoteAuthError,
    TokenIssuanceError,
)
from desk.domain.service import IdentityService, JWTService, PasswordService
from desk.domain.value import UserTokenResponse
from tests.conftest import make_user_info
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def register_staff(
    container: AsyncContainer,
    email: str = "agent@example.com",
    password: str = "s3cret",
    community_id: int = 7,
) -> str:
    """Provision an account through the real workflow and return its uuid."""
    use_case = await container.get(RegisterStaffUseCase)
    response = await use_case.execute(
        RegisterStaffRequest(
            community_id=community_id,
            user_info=make_user_info(email=email, password=password),
        )
    )
    return response.uuid


class TestLoginWithAccountUseCase:
    """Tests for LoginWithAccountUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_both_tokens(self, unit_env: AsyncContainer):
        """Correct credentials should yield a session token and an IM token."""
        # Arrange
        user_uuid = await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        jwt_service = await unit_env.get(JWTService)

        # Act
        response = await login_use_case.execute(
            LoginRequest(email="agent@example.com", password="s3cret")
        )

        # Assert
        assert response.uuid == user_uuid

        # Session token is bound to the user and its community
        payload = jwt_service.verify_token(response.kf_token.token)
        assert payload.user_uuid == user_uuid
        assert payload.community_id == 7
        assert response.kf_token.expire_time_seconds == 24 * 3600

        # IM token comes from the identity service for the configured platform
        assert response.im_token.token == f"mock-im-token-{user_uuid}-5"
        assert response.im_token.expire_time_seconds == 7776000

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, unit_env):
        """Wrong password should raise InvalidCredentialsError and issue nothing."""
        # Arrange
        await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        identity_service = await unit_env.get(IdentityService)

        with patch.object(identity_service, "get_user_token", AsyncMock()) as fetch:
            # Act & Assert
            with pytest.raises(InvalidCredentialsError, match="password is not correct"):
                await login_use_case.execute(
                    LoginRequest(email="agent@example.com", password="wrong")
                )

        fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_email_not_found(self, unit_env):
        """Unknown email should raise NotFoundError after a dummy hash check."""
        # Arrange
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        password_service = await unit_env.get(PasswordService)

        with patch.object(
            password_service,
            "compare_dummy",
            wraps=password_service.compare_dummy,
        ) as dummy:
            # Act & Assert
            with pytest.raises(NotFoundError):
                await login_use_case.execute(
                    LoginRequest(email="nobody@example.com", password="s3cret")
                )

        dummy.assert_called_once_with("s3cret")

    @pytest.mark.asyncio
    async def test_token_issuance_failure_skips_remote_call(self, unit_env):
        """A signing failure should stop login before the identity service call."""
        # Arrange
        await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        jwt_service = await unit_env.get(JWTService)
        identity_service = await unit_env.get(IdentityService)

        with (
            patch.object(
                jwt_service, "issue", side_effect=TokenIssuanceError("no key")
            ),
            patch.object(identity_service, "get_user_token", AsyncMock()) as fetch,
        ):
            # Act & Assert
            with pytest.raises(TokenIssuanceError):
                await login_use_case.execute(
                    LoginRequest(email="agent@example.com", password="s3cret")
                )

        fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_remote_refusal_is_remote_auth_error(self, unit_env):
        """A non-zero code from the identity service should fail the login."""
        # Arrange
        await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        openim = await unit_env.get(OpenIMClient)
        openim.token_err_code = 1501

        # Act & Assert
        with pytest.raises(RemoteAuthError):
            await login_use_case.execute(
                LoginRequest(email="agent@example.com", password="s3cret")
            )

    @pytest.mark.asyncio
    async def test_remote_transport_failure_is_remote_auth_error(self, unit_env):
        """A network failure on the token call should fail the login."""
        # Arrange
        await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        openim = await unit_env.get(OpenIMClient)
        openim.fail_transport = True

        # Act & Assert
        with pytest.raises(RemoteAuthError):
            await login_use_case.execute(
                LoginRequest(email="agent@example.com", password="s3cret")
            )

    @pytest.mark.asyncio
    async def test_success_code_without_token_is_remote_auth_error(self, unit_env):
        """errCode 0 with no usable token data must not yield an empty IM token."""
        # Arrange
        await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        openim = await unit_env.get(OpenIMClient)
        empty = UserTokenResponse.model_validate({"errCode": 0})
        zero_expiry = UserTokenResponse.model_validate(
            {"errCode": 0, "data": {"token": "t", "expireTimeSeconds": 0}}
        )

        for response in (empty, zero_expiry):
            with patch.object(
                openim, "get_user_token", AsyncMock(return_value=response)
            ):
                # Act & Assert
                with pytest.raises(RemoteAuthError):
                    await login_use_case.execute(
                        LoginRequest(email="agent@example.com", password="s3cret")
                    )

    @pytest.mark.asyncio
    async def test_repeated_login_fetches_fresh_remote_token(self, unit_env):
        """Every login should call the identity service again."""
        # Arrange
        await register_staff(unit_env)
        login_use_case = await unit_env.get(LoginWithAccountUseCase)
        identity_service = await unit_env.get(IdentityService)
        request = LoginRequest(email="agent@example.com", password="s3cret")

        with patch.object(
            identity_service,
            "get_user_token",
            wraps=identity_service.get_user_token,
        ) as fetch:
            # Act
            await login_use_case.execute(request)
            await login_use_case.execute(request)

        # Assert
        assert fetch.await_count == 2
