"""List thread posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.items import PostItem
from forum.domain.service import PostService, ThreadService
from forum.domain.value import PostCursor, PostSortMode, ThreadKey


class ListThreadPostsRequest(BaseModel):
    """List thread posts request."""

    slug_or_id: str
    sort: PostSortMode = PostSortMode.FLAT
    limit: int = Field(default=0, ge=0)  # 0 means no limit
    since: Optional[int] = Field(default=None, ge=0)  # Last post id seen, 0 for none
    desc: bool = False


class ListThreadPostsResponse(BaseModel):
    """List thread posts response."""

    posts: list[PostItem]


class ListThreadPostsUseCase:
    """Use case for reading a thread's posts in one of the traversal orders."""

    def __init__(self, thread_service: ThreadService, post_service: PostService) -> None:
        """Initialize list thread posts use case.

        Args:
            thread_service: Thread domain service
            post_service: Post domain service
        """
        self.thread_service = thread_service
        self.post_service = post_service

    async def execute(self, request: ListThreadPostsRequest) -> ListThreadPostsResponse:
        """Execute list thread posts flow.

        Args:
            request: Thread key, traversal order and cursor

        Returns:
            Posts in traversal order

        Raises:
            NotFoundError: If thread not found
            UnknownCursorError: If ``since`` names no post of the thread
        """
        key = ThreadKey.parse(request.slug_or_id)
        with logfire.span(
            "list_thread_posts.execute", thread=str(key), sort=request.sort.value
        ):
            thread = await self.thread_service.get_by_key(key)
            posts = await self.post_service.list_posts(
                thread.id,
                request.sort,
                PostCursor(since=request.since, limit=request.limit, desc=request.desc),
            )
            return ListThreadPostsResponse(posts=[PostItem.from_domain(p) for p in posts])
