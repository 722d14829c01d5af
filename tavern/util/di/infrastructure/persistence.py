"""Persistence component: PostgreSQL in production."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tavern.config import Settings
from tavern.domain.repository import GroupRepository, UserRepository
from tavern.persistence.database import (
    create_engine,
    create_session_factory,
    TransactionOutcome,
    finish_transaction,
)
from tavern.persistence.repository import (
    PostgresGroupRepository,
    PostgresUserRepository,
)
from tavern.util.di.base import ProviderBase
from tavern.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by PostgreSQL, one transaction per request."""

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
        self,
        session_factory: async_sessionmaker[AsyncSession],
        outcome: TransactionOutcome,
    ) -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            # dishka sends an unhandled exception, or None, back into the generator
            error = yield session
            await finish_transaction(session, error or outcome.error)

    @provide(scope=Scope.REQUEST)
    def get_transaction_outcome(self) -> TransactionOutcome:
        return TransactionOutcome()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_group_repository(self, session: AsyncSession) -> GroupRepository:
        return PostgresGroupRepository(session)
