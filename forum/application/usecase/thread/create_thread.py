"""Create thread use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.application.usecase.items import ThreadItem
from forum.domain.model import ThreadDraft
from forum.domain.service import ThreadService
from forum.domain.value import ForumSlug, Nickname


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    forum: str  # Forum slug from the path
    author: str
    title: str
    message: str
    slug: Optional[str] = None
    created: Optional[datetime] = None


class CreateThreadResponse(BaseModel):
    """Create thread response.

    ``created`` is False when the slug was taken and ``thread`` is the
    thread that holds it.
    """

    created: bool
    thread: ThreadItem


class CreateThreadUseCase:
    """Use case for starting a thread in a forum."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> CreateThreadResponse:
        """Execute create thread flow.

        Raises:
            MissingReferenceError: If the forum or author does not exist
        """
        draft = ThreadDraft(
            slug=request.slug or None,
            author=Nickname(request.author),
            forum=ForumSlug(request.forum),
            title=request.title,
            message=request.message,
            created=request.created,
        )
        result = await self.thread_service.create_thread(draft)
        return CreateThreadResponse(
            created=result.created, thread=ThreadItem.from_domain(result.value)
        )
