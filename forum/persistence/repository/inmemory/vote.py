"""In-memory vote repository for testing."""

from typing import Optional

from forum.domain.error import StorageError, StorageErrorKind
from forum.domain.model.vote import Vote
from forum.domain.repository.vote import VoteRepository
from forum.domain.value import Nickname, ThreadId

from .database import InMemoryDatabase


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find(self, thread_id: ThreadId, nickname: Nickname) -> Optional[Vote]:
        """Find a user's vote on a thread."""
        return self._db.votes.get((thread_id, nickname))

    def _recount(self, thread_id: ThreadId) -> None:
        total = sum(v.voice for v in self._db.votes.values() if v.thread == thread_id)
        thread = self._db.threads[thread_id]
        self._db.threads[thread_id] = thread.model_copy(update={"votes": total})

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            StorageError: If the user already voted, or user/thread is missing
        """
        if (vote.thread, vote.nickname) in self._db.votes:
            raise StorageError(StorageErrorKind.UNIQUE, "votes_thread_nickname_key")
        self._db.require_thread(vote.thread, "votes_thread_fkey")
        self._db.require_user(vote.nickname, "votes_nickname_fkey")

        self._db.votes[(vote.thread, vote.nickname)] = vote
        self._recount(vote.thread)
        return vote

    async def update(self, vote: Vote) -> Optional[Vote]:
        """Change a vote's voice."""
        if (vote.thread, vote.nickname) not in self._db.votes:
            return None
        self._db.votes[(vote.thread, vote.nickname)] = vote
        self._recount(vote.thread)
        return vote
