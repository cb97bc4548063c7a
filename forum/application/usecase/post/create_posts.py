"""Create posts use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from forum.application.usecase.items import PostItem
from forum.domain.model import PostDraft
from forum.domain.service import PostService, ThreadService
from forum.domain.value import Nickname, PostId, ThreadKey


class NewPost(BaseModel):
    """A post in a create batch."""

    author: str
    message: str
    parent: Optional[int] = None  # None or 0 for a root post


class CreatePostsRequest(BaseModel):
    """Create posts request."""

    slug_or_id: str
    posts: list[NewPost]


class CreatePostsResponse(BaseModel):
    """Create posts response."""

    posts: list[PostItem]


class CreatePostsUseCase:
    """Use case for adding a batch of posts to a thread."""

    def __init__(self, thread_service: ThreadService, post_service: PostService) -> None:
        """Initialize create posts use case.

        Args:
            thread_service: Thread domain service
            post_service: Post domain service
        """
        self.thread_service = thread_service
        self.post_service = post_service

    async def execute(self, request: CreatePostsRequest) -> CreatePostsResponse:
        """Execute create posts flow.

        The thread is resolved first, so an unknown thread is reported even
        for an empty batch.

        Raises:
            NotFoundError: If thread not found
            InvalidParentError: If a parent is not a post of the thread
            MissingReferenceError: If an author does not exist
        """
        key = ThreadKey.parse(request.slug_or_id)
        with logfire.span(
            "create_posts.execute", thread=str(key), count=len(request.posts)
        ):
            thread = await self.thread_service.get_by_key(key)
            drafts = [
                PostDraft(
                    author=Nickname(p.author),
                    message=p.message,
                    parent=PostId(p.parent) if p.parent else None,
                )
                for p in request.posts
            ]
            posts = await self.post_service.create_posts(thread, drafts)
            return CreatePostsResponse(posts=[PostItem.from_domain(p) for p in posts])
