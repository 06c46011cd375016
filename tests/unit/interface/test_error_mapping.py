"""Unit tests for domain-to-HTTP error mapping."""

from uuid import uuid4

import pytest

from desk.domain.error import (
    CommunityCreationError,
    DomainError,
    InvalidCodeError,
    InvalidCredentialsError,
    NotFoundError,
    PersistenceError,
    RemoteAuthError,
    RemoteRegistrationError,
    TokenIssuanceError,
)
from desk.interface.error import INVALID_LOGIN_DETAIL, to_http_exception


class TestToHttpException:
    """Tests for to_http_exception()."""

    @pytest.mark.parametrize(
        "error, status_code",
        [
            (InvalidCodeError("a@x.com"), 400),
            (CommunityCreationError("boom"), 422),
            (PersistenceError("duplicate"), 409),
            (RemoteRegistrationError("refused", uuid4(), 3), 502),
            (RemoteAuthError("refused"), 502),
            (TokenIssuanceError("no key"), 500),
            (NotFoundError("Community", "7"), 404),
            (DomainError("unexpected"), 500),
        ],
    )
    def test_status_codes(self, error, status_code):
        assert to_http_exception(error).status_code == status_code

    def test_login_failures_are_indistinguishable(self):
        """Unknown email and wrong password should produce the same response."""
        unknown = to_http_exception(NotFoundError("User", "a@x.com"), login=True)
        wrong = to_http_exception(InvalidCredentialsError(), login=True)

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.detail == wrong.detail == INVALID_LOGIN_DETAIL

    def test_login_flag_keeps_remote_errors(self):
        """Identity service failures during login are still gateway errors."""
        assert to_http_exception(RemoteAuthError("down"), login=True).status_code == 502
