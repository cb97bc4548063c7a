"""Forum domain service."""

import logfire

from forum.domain.error import NotFoundError
from forum.domain.model import Forum
from forum.domain.repository import ForumRepository
from forum.domain.value import ForumSlug

from .base import Service
from .mutation import CreateResult, OptimisticMutation


class ForumService(Service):
    """Domain service for forum operations."""

    def __init__(
        self, forum_repository: ForumRepository, mutation: OptimisticMutation
    ) -> None:
        """Initialize forum service.

        Args:
            forum_repository: Forum repository
            mutation: Optimistic create protocol
        """
        self.forum_repository = forum_repository
        self.mutation = mutation

    async def create_forum(self, forum: Forum) -> CreateResult[Forum]:
        """Create a forum, or return the one already holding its slug.

        Raises:
            MissingReferenceError: If the owning user does not exist
        """
        with logfire.span(
            "forum_service.create_forum", slug=forum.slug, user=forum.user
        ):
            return await self.mutation.create(
                lambda: self.forum_repository.save(forum),
                lambda: self.forum_repository.find_by_slug(forum.slug),
                resource="Forum",
            )

    async def get_by_slug(self, slug: ForumSlug) -> Forum:
        """Get forum by slug.

        Raises:
            NotFoundError: If forum not found
        """
        with logfire.span("forum_service.get_by_slug", slug=slug):
            forum = await self.forum_repository.find_by_slug(slug)
            if not forum:
                logfire.warn("Forum not found", slug=slug)
                raise NotFoundError("Forum", slug)
            return forum
