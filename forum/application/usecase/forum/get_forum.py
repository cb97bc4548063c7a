"""Get forum details use case."""

from pydantic import BaseModel

from forum.application.usecase.items import ForumItem
from forum.domain.service import ForumService
from forum.domain.value import ForumSlug


class GetForumRequest(BaseModel):
    """Get forum request."""

    slug: str


class GetForumUseCase:
    """Use case for reading a forum with its counters."""

    def __init__(self, forum_service: ForumService) -> None:
        self.forum_service = forum_service

    async def execute(self, request: GetForumRequest) -> ForumItem:
        forum = await self.forum_service.get_by_slug(ForumSlug(request.slug))
        return ForumItem.from_domain(forum)
