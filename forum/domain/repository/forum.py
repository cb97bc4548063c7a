"""Forum repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.forum import Forum
from forum.domain.value import ForumSlug


class ForumRepository(ABC):
    """Repository for Forum entity."""

    @abstractmethod
    async def find_by_slug(self, slug: ForumSlug) -> Optional[Forum]:
        """Find a forum by slug.

        Args:
            slug: The forum's slug

        Returns:
            The forum if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, forum: Forum) -> Forum:
        """Insert a new forum with zeroed counters.

        Args:
            forum: The forum to insert

        Returns:
            The stored forum

        Raises:
            StorageError: UNIQUE if the slug is taken,
                FOREIGN_KEY if the owning user does not exist
        """
        pass
