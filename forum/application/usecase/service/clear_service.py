"""Clear service data use case."""

from forum.application.usecase.base import BaseUseCase
from forum.domain.service import StatusService


class ClearServiceUseCase(BaseUseCase):
    """Use case for wiping all forum data."""

    def __init__(self, status_service: StatusService) -> None:
        self.status_service = status_service

    async def execute(self, request: None = None) -> None:
        await self.status_service.clear()
