"""PostgreSQL implementation of VerificationCode repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from desk.domain.model import VerificationCode
from desk.domain.repository import VerificationCodeRepository
from desk.persistence.mappers import row_to_verification_code
from desk.persistence.tables import verification_codes_table


class PostgresVerificationCodeRepository(VerificationCodeRepository):
    """PostgreSQL implementation of VerificationCodeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, code: VerificationCode) -> VerificationCode:
        """Upsert the code for its email."""
        values = code.model_dump()
        stmt = (
            insert(verification_codes_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[verification_codes_table.c.email],
                set_={"code": values["code"], "expires_at": values["expires_at"]},
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return code

    async def find_by_email(self, email: str) -> Optional[VerificationCode]:
        """Find the current code for an email."""
        stmt = select(verification_codes_table).where(
            verification_codes_table.c.email == email
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_verification_code(dict(row)) if row else None

    async def delete_by_email(self, email: str) -> None:
        """Remove the code for an email."""
        stmt = verification_codes_table.delete().where(
            verification_codes_table.c.email == email
        )
        await self.session.execute(stmt)
        await self.session.flush()
