"""Persistence component: PostgreSQL in production, in-memory in tests."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    ForumRepository,
    PostRepository,
    StatusRepository,
    ThreadRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from forum.persistence.database import (
    PostgresTransactionManager,
    create_engine,
    create_session_factory,
)
from forum.persistence.repository import (
    PostgresForumRepository,
    PostgresPostRepository,
    PostgresStatusRepository,
    PostgresThreadRepository,
    PostgresUserRepository,
    PostgresVoteRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Swappable persistence component.

    Implementations must provide a ``TransactionManager`` and one
    repository per aggregate, all in request scope.
    """

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one PostgreSQL session per request."""

    __is_mock__ = False

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def engine(self, settings: Settings) -> AsyncEngine:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """The request's unit of work.

        Commits when the request finishes cleanly. Any exception escaping
        the handler rolls back everything the request wrote, including
        savepoints that were already released.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Request rolled back", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide
    def transactions(self, session: AsyncSession) -> TransactionManager:
        return PostgresTransactionManager(session)

    @provide
    def users(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide
    def forums(self, session: AsyncSession) -> ForumRepository:
        return PostgresForumRepository(session)

    @provide
    def threads(self, session: AsyncSession) -> ThreadRepository:
        return PostgresThreadRepository(session)

    @provide
    def posts(self, session: AsyncSession) -> PostRepository:
        """Posts, including path allocation and tree traversal queries."""
        return PostgresPostRepository(session)

    @provide
    def votes(self, session: AsyncSession) -> VoteRepository:
        return PostgresVoteRepository(session)

    @provide
    def status(self, session: AsyncSession) -> StatusRepository:
        return PostgresStatusRepository(session)
