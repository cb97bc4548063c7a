"""Shared in-memory store for the in-memory repositories.

Rows live in plain dicts keyed like the primary keys of the SQL schema.
Uniqueness and foreign keys are checked by the repositories and reported
with the same constraint names the database uses, so the domain layer
cannot tell the two stores apart.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import AsyncIterator, Dict, Optional, Tuple

from forum.domain.error import StorageError, StorageErrorKind
from forum.domain.model import Forum, Post, Thread, User, Vote
from forum.domain.repository import TransactionManager


@dataclass
class InMemoryDatabase:
    """All forum tables plus the id counters."""

    users: Dict[str, User] = field(default_factory=dict)
    forums: Dict[str, Forum] = field(default_factory=dict)
    threads: Dict[int, Thread] = field(default_factory=dict)
    posts: Dict[int, Post] = field(default_factory=dict)
    votes: Dict[Tuple[int, str], Vote] = field(default_factory=dict)
    last_thread_id: int = 0
    last_post_id: int = 0

    def next_thread_id(self) -> int:
        self.last_thread_id += 1
        return self.last_thread_id

    def next_post_id(self) -> int:
        self.last_post_id += 1
        return self.last_post_id

    def snapshot(self) -> "InMemoryDatabase":
        """Copy of the current state. Models are immutable, so rows are shared."""
        return InMemoryDatabase(
            users=dict(self.users),
            forums=dict(self.forums),
            threads=dict(self.threads),
            posts=dict(self.posts),
            votes=dict(self.votes),
            last_thread_id=self.last_thread_id,
            last_post_id=self.last_post_id,
        )

    def restore(self, snapshot: "InMemoryDatabase") -> None:
        """Roll back to a snapshot. Id counters keep advancing, like sequences."""
        self.users = snapshot.users
        self.forums = snapshot.forums
        self.threads = snapshot.threads
        self.posts = snapshot.posts
        self.votes = snapshot.votes

    def clear(self) -> None:
        self.users.clear()
        self.forums.clear()
        self.threads.clear()
        self.posts.clear()
        self.votes.clear()

    def require_user(self, nickname: str, constraint: str) -> None:
        """Foreign key check against users."""
        if nickname not in self.users:
            raise StorageError(StorageErrorKind.FOREIGN_KEY, constraint)

    def require_forum(self, slug: str, constraint: str) -> None:
        """Foreign key check against forums."""
        if slug not in self.forums:
            raise StorageError(StorageErrorKind.FOREIGN_KEY, constraint)

    def forum_in_any_case(self, slug: str) -> Optional[Forum]:
        """The forum whose slug equals ``slug`` once both are lower-cased."""
        wanted = slug.lower()
        for stored in self.forums.values():
            if stored.slug.lower() == wanted:
                return stored
        return None

    def require_thread(self, thread_id: int, constraint: str) -> None:
        """Foreign key check against threads."""
        if thread_id not in self.threads:
            raise StorageError(StorageErrorKind.FOREIGN_KEY, constraint)


class InMemoryTransactionManager(TransactionManager):
    """Snapshot on entry, restore on error."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self.database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = self.database.snapshot()
        try:
            yield
        except BaseException:
            self.database.restore(snapshot)
            raise
