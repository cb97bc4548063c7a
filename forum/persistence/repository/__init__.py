"""PostgreSQL repository implementations."""

from forum.persistence.repository.forum import PostgresForumRepository
from forum.persistence.repository.post import PostgresPostRepository
from forum.persistence.repository.status import PostgresStatusRepository
from forum.persistence.repository.thread import PostgresThreadRepository
from forum.persistence.repository.user import PostgresUserRepository
from forum.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresForumRepository",
    "PostgresThreadRepository",
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresStatusRepository",
]
