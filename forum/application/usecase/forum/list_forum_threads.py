"""List forum threads use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.items import ThreadItem
from forum.domain.service import ForumService, ThreadService
from forum.domain.value import ForumSlug, ThreadPage


class ListForumThreadsRequest(BaseModel):
    """List forum threads request."""

    slug: str
    limit: int = Field(default=0, ge=0)  # 0 means no limit
    since: Optional[datetime] = None
    desc: bool = False


class ListForumThreadsResponse(BaseModel):
    """List forum threads response."""

    threads: list[ThreadItem]


class ListForumThreadsUseCase:
    """Use case for listing a forum's threads by creation time."""

    def __init__(
        self, forum_service: ForumService, thread_service: ThreadService
    ) -> None:
        """Initialize list forum threads use case.

        Args:
            forum_service: Forum domain service
            thread_service: Thread domain service
        """
        self.forum_service = forum_service
        self.thread_service = thread_service

    async def execute(self, request: ListForumThreadsRequest) -> ListForumThreadsResponse:
        """Execute list forum threads flow.

        Raises:
            NotFoundError: If forum not found
        """
        with logfire.span("list_forum_threads.execute", slug=request.slug):
            forum = await self.forum_service.get_by_slug(ForumSlug(request.slug))
            threads = await self.thread_service.list_forum_threads(
                forum.slug,
                ThreadPage(limit=request.limit, since=request.since, desc=request.desc),
            )
            return ListForumThreadsResponse(
                threads=[ThreadItem.from_domain(t) for t in threads]
            )
