"""Service status repository interface."""

from abc import ABC, abstractmethod

from forum.domain.model.status import ServiceStatus


class StatusRepository(ABC):
    """Store-wide aggregates and maintenance."""

    @abstractmethod
    async def status(self) -> ServiceStatus:
        """Count users, forums, threads and posts."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Delete every row of every table."""
        pass
