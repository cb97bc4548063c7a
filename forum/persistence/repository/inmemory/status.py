"""In-memory status repository for testing."""

from forum.domain.model import ServiceStatus
from forum.domain.repository.status import StatusRepository

from .database import InMemoryDatabase


class InMemoryStatusRepository(StatusRepository):
    """In-memory implementation of StatusRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def status(self) -> ServiceStatus:
        return ServiceStatus(
            users=len(self._db.users),
            forums=len(self._db.forums),
            threads=len(self._db.threads),
            posts=len(self._db.posts),
        )

    async def clear(self) -> None:
        self._db.clear()
