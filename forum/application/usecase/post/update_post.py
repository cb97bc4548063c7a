"""Update post use case."""

from typing import Optional

from pydantic import BaseModel

from forum.application.usecase.items import PostItem
from forum.domain.service import PostService
from forum.domain.value import PostId


class UpdatePostRequest(BaseModel):
    """Update post request."""

    post_id: int
    message: Optional[str] = None


class UpdatePostUseCase:
    """Use case for editing a post's message."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> PostItem:
        """Execute update post flow.

        The post is marked edited only if the message really changes.

        Raises:
            NotFoundError: If post not found
        """
        post = await self.post_service.update_message(
            PostId(request.post_id), request.message
        )
        return PostItem.from_domain(post)
