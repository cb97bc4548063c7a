"""PostgreSQL implementation of Status repository."""

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import ServiceStatus
from forum.domain.repository import StatusRepository
from forum.persistence.errors import storage_errors
from forum.persistence.tables import (
    forums_table,
    posts_table,
    threads_table,
    users_table,
)


class PostgresStatusRepository(StatusRepository):
    """PostgreSQL implementation of StatusRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def status(self) -> ServiceStatus:
        """Count rows of the four main tables in one round trip."""

        def count(table):
            return select(func.count()).select_from(table).scalar_subquery()

        stmt = select(
            count(users_table).label("users"),
            count(forums_table).label("forums"),
            count(threads_table).label("threads"),
            count(posts_table).label("posts"),
        )
        result = await self.session.execute(stmt)
        return ServiceStatus(**result.one()._asdict())

    async def clear(self) -> None:
        """Truncate every table."""
        with storage_errors():
            await self.session.execute(
                text("TRUNCATE votes, posts, threads, forums, users CASCADE")
            )
