"""Create forum use case."""

from pydantic import BaseModel

from forum.application.usecase.items import ForumItem
from forum.domain.model import Forum
from forum.domain.service import ForumService
from forum.domain.value import ForumSlug, Nickname


class CreateForumRequest(BaseModel):
    """Create forum request."""

    slug: str
    title: str
    user: str  # Owner nickname


class CreateForumResponse(BaseModel):
    """Create forum response.

    ``created`` is False when the slug was taken and ``forum`` is the
    forum that holds it.
    """

    created: bool
    forum: ForumItem


class CreateForumUseCase:
    """Use case for creating a forum."""

    def __init__(self, forum_service: ForumService) -> None:
        """Initialize create forum use case.

        Args:
            forum_service: Forum domain service
        """
        self.forum_service = forum_service

    async def execute(self, request: CreateForumRequest) -> CreateForumResponse:
        """Execute create forum flow.

        Raises:
            MissingReferenceError: If the owner does not exist
        """
        forum = Forum(
            slug=ForumSlug(request.slug),
            title=request.title,
            user=Nickname(request.user),
        )
        result = await self.forum_service.create_forum(forum)
        return CreateForumResponse(
            created=result.created, forum=ForumItem.from_domain(result.value)
        )
