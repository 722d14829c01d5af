"""Async PostgreSQL engine and transactional sessions."""

import logfire
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tavern.config import DatabaseSettings


def create_engine(database: DatabaseSettings, echo: bool = False) -> AsyncEngine:
    return create_async_engine(
        database.url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories map rows to frozen domain models, nothing is read lazily
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


async def finish_transaction(
    session: AsyncSession, error: BaseException | None
) -> None:
    """End the request transaction: commit, or roll back if the request failed.

    Row locks taken with ``for_update`` are held until this returns, and a
    failing invite request leaves none of its invitations behind.
    """
    if error is None:
        await session.commit()
        return

    logfire.warn(
        "Transaction rolled back",
        error=str(error),
        error_type=type(error).__name__,
    )
    await session.rollback()


class TransactionOutcome:
    """Failure of the current request, recorded by the exception handlers.

    Errors turned into responses by a handler never reach the request
    container, so the session provider reads them from here.
    """

    def __init__(self) -> None:
        self.error: BaseException | None = None
