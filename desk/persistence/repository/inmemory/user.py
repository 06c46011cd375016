"""In-memory user repository for testing."""

from itertools import count
from typing import Optional

from desk.domain.error import PersistenceError
from desk.domain.model import UserAccount
from desk.domain.repository import UserRepository
from desk.domain.value import UserId, UserUUID


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Enforces the same uniqueness rules as the database (email, uuid).
    """

    def __init__(self) -> None:
        self._users: dict[UserId, UserAccount] = {}
        self._ids = count(1)

    async def create(self, user: UserAccount) -> UserAccount:
        """Insert a user, assigning the next row id."""
        for existing in self._users.values():
            if existing.email == user.email:
                raise PersistenceError(f"Duplicate email: {user.email}")
            if existing.uuid == user.uuid:
                raise PersistenceError(f"Duplicate uuid: {user.uuid}")

        stored = user.model_copy(update={"id": UserId(next(self._ids))})
        self._users[stored.id] = stored
        return stored

    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        """Find a user by email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_by_uuid(self, user_uuid: UserUUID) -> Optional[UserAccount]:
        """Find a user by UUID."""
        for user in self._users.values():
            if user.uuid == user_uuid:
                return user
        return None

    async def delete(self, user: UserAccount) -> None:
        """Delete a user by row id."""
        self._users.pop(user.id, None)
