"""Thread domain service."""

from typing import Optional

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Thread, ThreadDraft
from forum.domain.repository import ThreadRepository
from forum.domain.value import ForumSlug, ThreadKey, ThreadPage

from .base import Service
from .mutation import CreateResult, OptimisticMutation


class ThreadService(Service):
    """Domain service for thread operations."""

    def __init__(
        self, thread_repository: ThreadRepository, mutation: OptimisticMutation
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            mutation: Optimistic create protocol
        """
        self.thread_repository = thread_repository
        self.mutation = mutation

    async def create_thread(self, draft: ThreadDraft) -> CreateResult[Thread]:
        """Create a thread in a forum.

        A thread whose slug is already taken resolves to the existing
        thread. The forum's thread counter grows with each new thread.

        Args:
            draft: Thread fields

        Returns:
            The created thread, or the existing one with the same slug

        Raises:
            MissingReferenceError: If the forum or author does not exist
        """
        with logfire.span(
            "thread_service.create_thread",
            forum=draft.forum,
            author=draft.author,
            slug=draft.slug,
        ):

            async def existing() -> Optional[Thread]:
                if draft.slug is None:
                    return None
                return await self.thread_repository.find_by_slug(draft.slug)

            return await self.mutation.create(
                lambda: self.thread_repository.save(draft),
                existing,
                resource="Thread",
            )

    async def get_by_key(self, key: ThreadKey) -> Thread:
        """Resolve a thread by id or slug.

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span("thread_service.get_by_key", key=str(key)):
            thread = await self.thread_repository.find_by_key(key)
            if not thread:
                logfire.warn("Thread not found", key=str(key))
                raise NotFoundError("Thread", str(key))
            return thread

    async def update_thread(
        self,
        key: ThreadKey,
        title: Optional[str] = None,
        message: Optional[str] = None,
    ) -> Thread:
        """Change a thread's title and/or message.

        Empty or missing fields keep their current value.

        Raises:
            NotFoundError: If thread not found
        """
        with logfire.span("thread_service.update_thread", key=str(key)):
            thread = await self.get_by_key(key)
            if not title and not message:
                return thread

            async with self.mutation.transactions.transaction():
                updated = await self.thread_repository.update(
                    thread.id, title or thread.title, message or thread.message
                )
            if not updated:
                raise NotFoundError("Thread", str(key))
            logfire.info("Thread updated", thread_id=thread.id)
            return updated

    async def list_forum_threads(
        self, forum: ForumSlug, page: ThreadPage
    ) -> list[Thread]:
        """Threads of a forum ordered by creation time."""
        with logfire.span(
            "thread_service.list_forum_threads",
            forum=forum,
            limit=page.limit,
            desc=page.desc,
        ):
            threads = await self.thread_repository.find_by_forum(forum, page)
            logfire.info("Forum threads retrieved", forum=forum, count=len(threads))
            return threads
