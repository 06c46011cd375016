"""User account domain service."""

from uuid import uuid4

import logfire

from desk.domain.error import NotFoundError
from desk.domain.model import UserAccount
from desk.domain.repository import UserRepository
from desk.domain.value import UserUUID

from .base import Service


class UserService(Service):
    """Domain service for user account operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    @staticmethod
    def new_uuid() -> UserUUID:
        """Generate the identifier shared with the identity service."""
        return UserUUID(uuid4())

    async def create(self, user: UserAccount) -> UserAccount:
        """Insert a new user.

        Raises:
            PersistenceError: If the store rejects the row
        """
        with logfire.span(
            "user_service.create", user_uuid=str(user.uuid), email=user.email
        ):
            saved = await self.user_repository.create(user)
            logfire.info(
                "User created",
                user_uuid=str(saved.uuid),
                user_id=saved.id,
                is_admin=saved.is_admin,
            )
            return saved

    async def get_by_uuid(self, user_uuid: UserUUID) -> UserAccount:
        """Get user by UUID.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_uuid", user_uuid=str(user_uuid)):
            user = await self.user_repository.find_by_uuid(user_uuid)
            if not user:
                logfire.warn("User not found", user_uuid=str(user_uuid))
                raise NotFoundError("User", str(user_uuid))
            return user

    async def get_by_email(self, email: str) -> UserAccount:
        """Get user by email.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email)
                raise NotFoundError("User", email)
            logfire.info("User found", email=email, user_uuid=str(user.uuid))
            return user

    async def delete(self, user: UserAccount) -> None:
        """Delete a user."""
        with logfire.span(
            "user_service.delete", user_uuid=str(user.uuid), user_id=user.id
        ):
            await self.user_repository.delete(user)
            logfire.info("User deleted", user_uuid=str(user.uuid), user_id=user.id)
