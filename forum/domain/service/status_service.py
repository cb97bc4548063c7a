"""Service status domain service."""

import logfire

from forum.domain.model import ServiceStatus
from forum.domain.repository import StatusRepository, TransactionManager

from .base import Service


class StatusService(Service):
    """Store-wide counts and reset."""

    def __init__(
        self, status_repository: StatusRepository, transactions: TransactionManager
    ) -> None:
        self.status_repository = status_repository
        self.transactions = transactions

    async def get_status(self) -> ServiceStatus:
        with logfire.span("status_service.get_status"):
            return await self.status_repository.status()

    async def clear(self) -> None:
        """Delete all users, forums, threads, posts and votes."""
        with logfire.span("status_service.clear"):
            async with self.transactions.transaction():
                await self.status_repository.clear()
            logfire.info("All data cleared")
