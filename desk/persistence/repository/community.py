"""PostgreSQL implementation of Community repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession

from desk.domain.error import PersistenceError
from desk.domain.model import Community
from desk.domain.repository import CommunityRepository
from desk.domain.value import CommunityId
from desk.persistence.mappers import community_to_dict, row_to_community
from desk.persistence.tables import communities_table


class PostgresCommunityRepository(CommunityRepository):
    """PostgreSQL implementation of CommunityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, community: Community) -> Community:
        """Insert a community and return it with its row id."""
        stmt = (
            communities_table.insert()
            .values(**community_to_dict(community))
            .returning(*communities_table.c)
        )
        try:
            result = await self.session.execute(stmt)
            await self.session.flush()
        except DBAPIError as e:
            raise PersistenceError(
                f"Cannot create community {community.name}: {e.orig}"
            ) from e

        row = result.mappings().one()
        return row_to_community(dict(row))

    async def find_by_id(self, community_id: CommunityId) -> Optional[Community]:
        """Find a community by row id."""
        stmt = select(communities_table).where(communities_table.c.id == community_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_community(dict(row)) if row else None
