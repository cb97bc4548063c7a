"""In-memory persistence component."""

from dishka import Scope, provide

from forum.domain.repository import (
    ForumRepository,
    PostRepository,
    StatusRepository,
    ThreadRepository,
    TransactionManager,
    UserRepository,
    VoteRepository,
)
from forum.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryForumRepository,
    InMemoryPostRepository,
    InMemoryStatusRepository,
    InMemoryThreadRepository,
    InMemoryTransactionManager,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from forum.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Repositories over one ``InMemoryDatabase`` per container.

    Requests made through the same container share data, and each test
    builds its own container so it starts empty.
    """

    __is_mock__ = True

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def database(self) -> InMemoryDatabase:
        return InMemoryDatabase()

    @provide
    def transactions(self, database: InMemoryDatabase) -> TransactionManager:
        return InMemoryTransactionManager(database)

    @provide
    def users(self, database: InMemoryDatabase) -> UserRepository:
        return InMemoryUserRepository(database)

    @provide
    def forums(self, database: InMemoryDatabase) -> ForumRepository:
        return InMemoryForumRepository(database)

    @provide
    def threads(self, database: InMemoryDatabase) -> ThreadRepository:
        return InMemoryThreadRepository(database)

    @provide
    def posts(self, database: InMemoryDatabase) -> PostRepository:
        return InMemoryPostRepository(database)

    @provide
    def votes(self, database: InMemoryDatabase) -> VoteRepository:
        return InMemoryVoteRepository(database)

    @provide
    def status(self, database: InMemoryDatabase) -> StatusRepository:
        return InMemoryStatusRepository(database)
