"""User account repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from desk.domain.model.user import UserAccount
from desk.domain.value import UserUUID


class UserRepository(ABC):
    """Repository for UserAccount entities.

    Defines the contract for the credential store.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def create(self, user: UserAccount) -> UserAccount:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The stored user with its row id assigned

        Raises:
            PersistenceError: If the store rejects the row (e.g. duplicate email)
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        """Find a user by email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_uuid(self, user_uuid: UserUUID) -> Optional[UserAccount]:
        """Find a user by its UUID.

        Args:
            user_uuid: The user's globally unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, user: UserAccount) -> None:
        """Delete a user.

        Args:
            user: The user to delete (addressed by row id)
        """
        pass
