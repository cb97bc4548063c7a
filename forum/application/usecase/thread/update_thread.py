"""Update thread use case."""

from typing import Optional

from pydantic import BaseModel

from forum.application.usecase.items import ThreadItem
from forum.domain.service import ThreadService
from forum.domain.value import ThreadKey


class UpdateThreadRequest(BaseModel):
    """Update thread request. Missing fields keep their current value."""

    slug_or_id: str
    title: Optional[str] = None
    message: Optional[str] = None


class UpdateThreadUseCase:
    """Use case for editing a thread's title and message."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize update thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: UpdateThreadRequest) -> ThreadItem:
        """Execute update thread flow.

        Raises:
            NotFoundError: If thread not found
        """
        thread = await self.thread_service.update_thread(
            ThreadKey.parse(request.slug_or_id),
            title=request.title,
            message=request.message,
        )
        return ThreadItem.from_domain(thread)
