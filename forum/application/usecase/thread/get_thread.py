"""Get thread details use case."""

from pydantic import BaseModel

from forum.application.usecase.items import ThreadItem
from forum.domain.service import ThreadService
from forum.domain.value import ThreadKey


class GetThreadRequest(BaseModel):
    """Get thread request."""

    slug_or_id: str


class GetThreadUseCase:
    """Use case for reading a thread by id or slug."""

    def __init__(self, thread_service: ThreadService) -> None:
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> ThreadItem:
        thread = await self.thread_service.get_by_key(
            ThreadKey.parse(request.slug_or_id)
        )
        return ThreadItem.from_domain(thread)
