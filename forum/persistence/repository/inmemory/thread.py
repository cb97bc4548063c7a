"""In-memory thread repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from forum.domain.error import StorageError, StorageErrorKind
from forum.domain.model.thread import Thread, ThreadDraft
from forum.domain.repository.thread import ThreadRepository
from forum.domain.value import ForumSlug, ThreadId, ThreadPage

from .database import InMemoryDatabase


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._db.threads.get(thread_id)

    async def find_by_slug(self, slug: str) -> Optional[Thread]:
        """Find a thread by slug."""
        for thread in self._db.threads.values():
            if thread.slug == slug:
                return thread
        return None

    async def save(self, draft: ThreadDraft) -> Thread:
        """Insert a thread and bump the forum's thread counter."""
        if draft.slug is not None and await self.find_by_slug(draft.slug):
            raise StorageError(StorageErrorKind.UNIQUE, "threads_slug_key")
        self._db.require_user(draft.author, "threads_author_fkey")
        self._db.require_forum(draft.forum, "threads_forum_fkey")

        thread = Thread(
            id=ThreadId(self._db.next_thread_id()),
            slug=draft.slug,
            author=draft.author,
            forum=draft.forum,
            title=draft.title,
            message=draft.message,
            created=draft.created or datetime.now(timezone.utc),
            votes=0,
        )
        self._db.threads[thread.id] = thread

        forum = self._db.forums[draft.forum]
        self._db.forums[forum.slug] = forum.model_copy(
            update={"threads": forum.threads + 1}
        )
        return thread

    async def update(
        self, thread_id: ThreadId, title: str, message: str
    ) -> Optional[Thread]:
        """Replace title and message."""
        thread = self._db.threads.get(thread_id)
        if thread is None:
            return None
        updated = thread.model_copy(update={"title": title, "message": message})
        self._db.threads[thread_id] = updated
        return updated

    async def find_by_forum(self, forum: ForumSlug, page: ThreadPage) -> list[Thread]:
        """Find a forum's threads by creation time."""
        wanted = forum.lower()
        threads = [t for t in self._db.threads.values() if t.forum.lower() == wanted]

        if page.since is not None:
            if page.desc:
                threads = [t for t in threads if t.created <= page.since]
            else:
                threads = [t for t in threads if t.created >= page.since]

        threads.sort(key=lambda t: (t.created, t.id), reverse=page.desc)
        if page.limit:
            threads = threads[: page.limit]
        return threads
