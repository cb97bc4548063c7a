"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase, InMemoryTransactionManager
from .forum import InMemoryForumRepository
from .post import InMemoryPostRepository
from .status import InMemoryStatusRepository
from .thread import InMemoryThreadRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryTransactionManager",
    "InMemoryForumRepository",
    "InMemoryPostRepository",
    "InMemoryStatusRepository",
    "InMemoryThreadRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
