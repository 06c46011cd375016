"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from desk.config import Settings
from desk.domain.repository import (
    CommunityRepository,
    UserRepository,
    VerificationCodeRepository,
)
from desk.persistence.database import create_engine, create_session_factory
from desk.persistence.repository import (
    PostgresCommunityRepository,
    PostgresUserRepository,
    PostgresVerificationCodeRepository,
)
from desk.util.di.base import ProviderBase
from desk.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """One engine per process, one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open the request's session.

        Whatever is still pending when the request ends is committed; on error
        it is rolled back. User rows are committed earlier by their repository.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request session", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_community_repository(self, session: AsyncSession) -> CommunityRepository:
        return PostgresCommunityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_verification_code_repository(
        self, session: AsyncSession
    ) -> VerificationCodeRepository:
        return PostgresVerificationCodeRepository(session)
