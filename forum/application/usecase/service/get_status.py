"""Service status use case."""

from pydantic import BaseModel

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import StatusService


class GetStatusResponse(BaseModel):
    """Row counts of the main entities."""

    user: int
    forum: int
    thread: int
    post: int


class GetStatusUseCase(BaseUseCase):
    """Use case for reporting how much data the service holds."""

    def __init__(self, status_service: StatusService) -> None:
        self.status_service = status_service

    async def execute(self, request: None = None) -> GetStatusResponse:
        status = await self.status_service.get_status()
        return GetStatusResponse(
            user=status.users,
            forum=status.forums,
            thread=status.threads,
            post=status.posts,
        )
