"""Test configuration and fixtures."""

import os
from uuid import uuid4

# Must be set before any Settings() is built
os.environ.setdefault("ENVIRONMENT", "test")
# Cheap bcrypt so hashing doesn't dominate the suite
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault(
    "AUTH__JWT_SECRET", "test-secret-key-that-is-long-enough-for-hs256"
)

from desk.application.usecase.account import UserInfo  # noqa: E402
from desk.domain.model import UserAccount  # noqa: E402
from desk.domain.service import PasswordService  # noqa: E402
from desk.domain.value import CommunityId, UserUUID  # noqa: E402

# Shared low-cost hasher for tests that build accounts by hand
password_service = PasswordService(rounds=4)


def make_user(
    email: str = "agent@example.com",
    nickname: str = "Agent",
    password: str = "s3cret",
    community_id: int = 1,
    is_admin: bool = False,
) -> UserAccount:
    """Helper to build an unsaved account with a hashed password."""
    return UserAccount(
        uuid=UserUUID(uuid4()),
        email=email,
        nickname=nickname,
        password=password_service.hash(password),
        community_id=CommunityId(community_id),
        is_admin=is_admin,
    )


def make_user_info(
    email: str = "agent@example.com",
    nickname: str = "Agent",
    password: str = "s3cret",
) -> UserInfo:
    """Helper to build the profile part of a registration request."""
    return UserInfo(email=email, nickname=nickname, password=password)
