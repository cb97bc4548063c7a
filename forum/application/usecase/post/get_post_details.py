"""Get post details use case."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel

from forum.application.usecase.items import ForumItem, PostItem, ThreadItem, UserItem
from forum.domain.service import ForumService, PostService, ThreadService, UserService
from forum.domain.value import PostId, ThreadKey


class RelatedEntity(str, Enum):
    """Entities that can be embedded next to a post."""

    USER = "user"
    FORUM = "forum"
    THREAD = "thread"


class GetPostDetailsRequest(BaseModel):
    """Get post details request."""

    post_id: int
    related: list[RelatedEntity] = []


class GetPostDetailsResponse(BaseModel):
    """Post with the related entities that were asked for."""

    post: PostItem
    author: Optional[UserItem] = None
    forum: Optional[ForumItem] = None
    thread: Optional[ThreadItem] = None


class GetPostDetailsUseCase:
    """Use case for reading a post and, optionally, its author, forum and thread."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        forum_service: ForumService,
        thread_service: ThreadService,
    ) -> None:
        """Initialize get post details use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            forum_service: Forum domain service
            thread_service: Thread domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.forum_service = forum_service
        self.thread_service = thread_service

    async def execute(self, request: GetPostDetailsRequest) -> GetPostDetailsResponse:
        """Execute get post details flow.

        Raises:
            NotFoundError: If the post (or a related entity) is not found
        """
        post = await self.post_service.get_by_id(PostId(request.post_id))
        response = GetPostDetailsResponse(post=PostItem.from_domain(post))

        if RelatedEntity.USER in request.related:
            user = await self.user_service.get_by_nickname(post.author)
            response.author = UserItem.from_domain(user)
        if RelatedEntity.FORUM in request.related:
            forum = await self.forum_service.get_by_slug(post.forum)
            response.forum = ForumItem.from_domain(forum)
        if RelatedEntity.THREAD in request.related:
            thread = await self.thread_service.get_by_key(ThreadKey(id=post.thread))
            response.thread = ThreadItem.from_domain(thread)

        return response
