"""In-memory forum repository for testing."""

from typing import Optional

from forum.domain.error import StorageError, StorageErrorKind
from forum.domain.model.forum import Forum
from forum.domain.repository.forum import ForumRepository
from forum.domain.value import ForumSlug

from .database import InMemoryDatabase


class InMemoryForumRepository(ForumRepository):
    """In-memory implementation of ForumRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_slug(self, slug: ForumSlug) -> Optional[Forum]:
        """Find a forum by slug, ignoring case."""
        return self._db.forum_in_any_case(slug)

    async def save(self, forum: Forum) -> Forum:
        """Insert a forum with zeroed counters."""
        if forum.slug in self._db.forums:
            raise StorageError(StorageErrorKind.UNIQUE, "forums_pkey")
        if self._db.forum_in_any_case(forum.slug) is not None:
            raise StorageError(StorageErrorKind.UNIQUE, "forums_slug_lower_key")
        self._db.require_user(forum.user, "forums_user_fkey")

        stored = forum.model_copy(update={"posts": 0, "threads": 0})
        self._db.forums[forum.slug] = stored
        return stored
