"""Thread repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.thread import Thread, ThreadDraft
from forum.domain.value import ForumSlug, ThreadId, ThreadKey, ThreadPage


class ThreadRepository(ABC):
    """Repository for Thread entity.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by numeric id."""
        pass

    @abstractmethod
    async def find_by_slug(self, slug: str) -> Optional[Thread]:
        """Find a thread by slug."""
        pass

    async def find_by_key(self, key: ThreadKey) -> Optional[Thread]:
        """Find a thread by id or slug, whichever the key carries.

        Args:
            key: Thread key parsed from a request

        Returns:
            The thread if found, None otherwise
        """
        if key.id is not None:
            return await self.find_by_id(key.id)
        return await self.find_by_slug(key.slug or "")

    @abstractmethod
    async def save(self, draft: ThreadDraft) -> Thread:
        """Insert a new thread and bump the forum's thread counter.

        Args:
            draft: Thread fields; ``created`` defaults to now

        Returns:
            The stored thread with its generated id

        Raises:
            StorageError: UNIQUE if the slug is taken,
                FOREIGN_KEY if the forum or author does not exist
        """
        pass

    @abstractmethod
    async def update(
        self, thread_id: ThreadId, title: str, message: str
    ) -> Optional[Thread]:
        """Replace a thread's title and message.

        Returns:
            The updated thread, or None if it does not exist
        """
        pass

    @abstractmethod
    async def find_by_forum(self, forum: ForumSlug, page: ThreadPage) -> List[Thread]:
        """Find threads of a forum ordered by creation time.

        Args:
            forum: Forum slug
            page: Creation-time keyset (inclusive), limit and direction

        Returns:
            List of threads
        """
        pass
