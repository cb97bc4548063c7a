"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.vote import Vote
from forum.domain.value import Nickname, ThreadId


class VoteRepository(ABC):
    """Repository for Vote entity.

    Both writes recompute the thread's vote tally in the same unit of
    work, so the tally is always the sum of current voices.
    """

    @abstractmethod
    async def find(self, thread_id: ThreadId, nickname: Nickname) -> Optional[Vote]:
        """Find a user's vote on a thread."""
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            StorageError: UNIQUE if the user already voted on the thread,
                FOREIGN_KEY if the user or thread does not exist
        """
        pass

    @abstractmethod
    async def update(self, vote: Vote) -> Optional[Vote]:
        """Change the voice of an existing vote.

        Returns:
            The updated vote, or None if the user has not voted yet
        """
        pass
