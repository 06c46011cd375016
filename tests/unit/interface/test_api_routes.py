"""Tests for the HTTP routes over a mocked container."""

from unittest.mock import AsyncMock

from dishka import Provider, Scope, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi.testclient import TestClient
import pytest

from desk.adapter.mail.sender import MailError, MockMailSender
from desk.domain.repository import (
    CommunityRepository,
    UserRepository,
    VerificationCodeRepository,
)
from desk.domain.service import MailSender
from desk.interface.api.app import create_app
from desk.persistence.repository.inmemory import (
    InMemoryCommunityRepository,
    InMemoryUserRepository,
    InMemoryVerificationCodeRepository,
)
from tests.di import build_test_container


class SharedTestInfrastructure(Provider):
    """In-memory infrastructure kept for the whole app so data survives requests."""

    scope = Scope.APP

    def __init__(self, mail_sender: MockMailSender):
        super().__init__()
        self.mail_sender = mail_sender

    @provide
    def get_mail_sender(self) -> MailSender:
        return self.mail_sender

    @provide
    def get_user_repository(self) -> UserRepository:
        return InMemoryUserRepository()

    @provide
    def get_community_repository(self) -> CommunityRepository:
        return InMemoryCommunityRepository()

    @provide
    def get_verification_code_repository(self) -> VerificationCodeRepository:
        return InMemoryVerificationCodeRepository()


@pytest.fixture
def mail_sender():
    return MockMailSender()


@pytest.fixture
def client(mail_sender):
    """Create test client over mocked infrastructure."""
    container = build_test_container(
        extra_providers=[SharedTestInfrastructure(mail_sender), FastapiProvider()]
    )
    with TestClient(create_app(container)) as test_client:
        yield test_client


def read_mailed_code(mail_sender: MockMailSender) -> str:
    """Pull the last verification code out of the mock outbox."""
    _, _, body = mail_sender.outbox[-1]
    return body.split("is ")[1].split(".")[0]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestRegisterAndLogin:
    """End-to-end flow over HTTP with mocked collaborators."""

    def test_admin_registration_then_login(self, client, mail_sender):
        """A registered admin should be able to log in and receive both tokens."""
        # Arrange
        sent = client.post(
            "/api/v1/register/email/code", json={"email": "owner@acme.com"}
        )
        assert sent.status_code == 200
        code = read_mailed_code(mail_sender)

        # Act
        registered = client.post(
            "/api/v1/register/admin",
            json={
                "code": code,
                "community_info": {"name": "Acme", "email": "support@acme.com"},
                "user_info": {
                    "email": "owner@acme.com",
                    "nickname": "Owner",
                    "password": "s3cret",
                },
            },
        )
        logged_in = client.post(
            "/api/v1/login/account",
            json={"email": "owner@acme.com", "password": "s3cret"},
        )

        # Assert
        assert registered.status_code == 201
        assert logged_in.status_code == 200
        body = logged_in.json()
        assert body["uuid"] == registered.json()["uuid"]
        assert body["kf_token"]["token"]
        assert body["im_token"]["token"].startswith("mock-im-token-")

    def test_bad_code_is_400(self, client):
        response = client.post(
            "/api/v1/register/admin",
            json={
                "code": "000000",
                "community_info": {"name": "Acme", "email": "support@acme.com"},
                "user_info": {
                    "email": "owner@acme.com",
                    "nickname": "Owner",
                    "password": "s3cret",
                },
            },
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "code is not valid"

    def test_duplicate_staff_is_409(self, client):
        payload = {
            "community_id": 7,
            "user_info": {"email": "a@x.com", "nickname": "A", "password": "p"},
        }

        first = client.post("/api/v1/register/staff", json=payload)
        second = client.post("/api/v1/register/staff", json=payload)

        assert first.status_code == 201
        assert second.status_code == 409

    def test_oversized_email_is_rejected_before_the_store(self, client):
        payload = {
            "community_id": 7,
            "user_info": {
                "email": "a" * 256 + "@x.com",
                "nickname": "A",
                "password": "p",
            },
        }

        response = client.post("/api/v1/register/staff", json=payload)

        assert response.status_code == 422

    def test_login_failures_share_one_response(self, client):
        """Unknown email and wrong password should be indistinguishable."""
        client.post(
            "/api/v1/register/staff",
            json={
                "community_id": 7,
                "user_info": {"email": "a@x.com", "nickname": "A", "password": "p"},
            },
        )

        unknown = client.post(
            "/api/v1/login/account",
            json={"email": "nobody@x.com", "password": "p"},
        )
        wrong = client.post(
            "/api/v1/login/account",
            json={"email": "a@x.com", "password": "wrong"},
        )

        assert unknown.status_code == wrong.status_code == 401
        assert unknown.json() == wrong.json()

    def test_create_community(self, client):
        response = client.post(
            "/api/v1/community/create",
            json={"name": "Acme", "email": "support@acme.com"},
        )

        assert response.status_code == 201
        assert response.json()["id"] == 1


class TestSendCode:
    def test_mail_relay_failure_is_502(self, client, mail_sender):
        """A relay failure should not look like a server bug."""
        mail_sender.send = AsyncMock(side_effect=MailError("relay down"))

        response = client.post(
            "/api/v1/register/email/code", json={"email": "owner@acme.com"}
        )

        assert response.status_code == 502
