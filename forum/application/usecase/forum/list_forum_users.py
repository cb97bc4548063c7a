"""List forum users use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from forum.application.usecase.items import UserItem
from forum.domain.service import ForumService, UserService
from forum.domain.value import ForumSlug, UserPage


class ListForumUsersRequest(BaseModel):
    """List forum users request."""

    slug: str
    limit: int = Field(default=0, ge=0)  # 0 means no limit
    since: Optional[str] = None  # Nickname to continue after
    desc: bool = False


class ListForumUsersResponse(BaseModel):
    """List forum users response."""

    users: list[UserItem]


class ListForumUsersUseCase:
    """Use case for listing users who wrote in a forum."""

    def __init__(self, forum_service: ForumService, user_service: UserService) -> None:
        """Initialize list forum users use case.

        Args:
            forum_service: Forum domain service
            user_service: User domain service
        """
        self.forum_service = forum_service
        self.user_service = user_service

    async def execute(self, request: ListForumUsersRequest) -> ListForumUsersResponse:
        """Execute list forum users flow.

        Raises:
            NotFoundError: If forum not found
        """
        with logfire.span("list_forum_users.execute", slug=request.slug):
            forum = await self.forum_service.get_by_slug(ForumSlug(request.slug))
            users = await self.user_service.list_forum_users(
                forum.slug,
                UserPage(limit=request.limit, since=request.since, desc=request.desc),
            )
            return ListForumUsersResponse(users=[UserItem.from_domain(u) for u in users])
