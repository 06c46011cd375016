"""Unit tests for JWTService."""

from uuid import uuid4

import pytest

from desk.config import AuthSettings
from desk.domain.error import TokenIssuanceError
from desk.domain.service import JWTService
from desk.domain.value import CommunityId, UserUUID
from desk.util.jwt import JWTError

SECRET = "unit-test-secret-key-long-enough-for-hs256"


class TestJWTService:
    """Tests for session token issuance and verification."""

    def test_issue_binds_user_and_community(self):
        """Issued token should decode to the same user and community."""
        # Arrange
        service = JWTService(AuthSettings(jwt_secret=SECRET))
        user_uuid = UserUUID(uuid4())

        # Act
        token, expire_seconds = service.issue(user_uuid, CommunityId(7))

        # Assert
        payload = service.verify_token(token)
        assert payload.user_uuid == str(user_uuid)
        assert payload.community_id == 7
        assert expire_seconds == 24 * 3600

    def test_lifetime_follows_settings(self):
        service = JWTService(AuthSettings(jwt_secret=SECRET, jwt_expiry_hours=2))

        _, expire_seconds = service.issue(UserUUID(uuid4()), CommunityId(1))

        assert expire_seconds == 7200

    def test_expired_token_rejected(self):
        """Token past its expiry should fail verification."""
        # Arrange
        service = JWTService(AuthSettings(jwt_secret=SECRET, jwt_expiry_hours=-1))
        token, _ = service.issue(UserUUID(uuid4()), CommunityId(1))

        # Act & Assert
        with pytest.raises(JWTError, match="expired"):
            service.verify_token(token)

    def test_token_from_other_secret_rejected(self):
        """Token signed with a different secret should fail verification."""
        # Arrange
        issuer = JWTService(AuthSettings(jwt_secret=SECRET))
        verifier = JWTService(AuthSettings(jwt_secret=SECRET + "-rotated"))
        token, _ = issuer.issue(UserUUID(uuid4()), CommunityId(1))

        # Act & Assert
        with pytest.raises(JWTError, match="Invalid token"):
            verifier.verify_token(token)

    def test_signing_failure_is_token_issuance_error(self):
        """An unusable algorithm should surface as TokenIssuanceError."""
        # Arrange
        service = JWTService(AuthSettings(jwt_secret=SECRET, jwt_algorithm="NONE42"))

        # Act & Assert
        with pytest.raises(TokenIssuanceError):
            service.issue(UserUUID(uuid4()), CommunityId(1))
