"""PostgreSQL engine, sessions and savepoint transactions."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from forum.config import Settings
from forum.domain.repository import TransactionManager


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine over asyncpg, echoing SQL when ``debug`` is set."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions for Core statements, without expiry on commit or autoflush."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


class PostgresTransactionManager(TransactionManager):
    """Units of work as SAVEPOINTs inside the request's transaction.

    A failed unit rolls back to its savepoint only, so the session stays
    usable for a follow-up query. The outer transaction is committed or
    rolled back when the request ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
