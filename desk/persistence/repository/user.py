"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from desk.domain.error import PersistenceError
from desk.domain.model import UserAccount
from desk.domain.repository import UserRepository
from desk.domain.value import UserUUID
from desk.persistence.mappers import row_to_user, user_to_dict
from desk.persistence.tables import sys_users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: UserAccount) -> UserAccount:
        """Insert a user and return it with its row id.

        The row is committed before returning: the identity service is called
        next and must never reference a row that could still roll back.

        Raises:
            PersistenceError: On constraint violation (email, uuid) or data the
                columns reject
        """
        stmt = (
            sys_users_table.insert()
            .values(**user_to_dict(user))
            .returning(*sys_users_table.c)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except DBAPIError as e:
            raise PersistenceError(f"Cannot create user {user.email}: {e.orig}") from e

        stored = row_to_user(dict(result.mappings().one()))
        await self.session.commit()
        return stored

    async def find_by_email(self, email: str) -> Optional[UserAccount]:
        """Find a user by email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(sys_users_table).where(sys_users_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_uuid(self, user_uuid: UserUUID) -> Optional[UserAccount]:
        """Find a user by UUID.

        Args:
            user_uuid: UUID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(sys_users_table).where(sys_users_table.c.uuid == user_uuid)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def delete(self, user: UserAccount) -> None:
        """Delete a user by row id.

        Committed immediately, like create.

        Args:
            user: User to delete
        """
        stmt = sys_users_table.delete().where(sys_users_table.c.id == user.id)
        await self.session.execute(stmt)
        await self.session.flush()
        await self.session.commit()
