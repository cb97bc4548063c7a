"""PostgreSQL implementation of Forum repository."""

from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Forum
from forum.domain.repository import ForumRepository
from forum.domain.value import ForumSlug
from forum.persistence.errors import storage_errors
from forum.persistence.mappers import forum_to_dict, row_to_forum
from forum.persistence.tables import forums_table


class PostgresForumRepository(ForumRepository):
    """PostgreSQL implementation of ForumRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_slug(self, slug: ForumSlug) -> Optional[Forum]:
        """Find a forum by slug, ignoring case."""
        stmt = select(forums_table).where(
            func.lower(forums_table.c.slug) == func.lower(slug)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_forum(row._asdict()) if row else None

    async def save(self, forum: Forum) -> Forum:
        """Insert a forum with zeroed counters."""
        forum_dict = forum_to_dict(forum)
        forum_dict.update(posts=0, threads=0)
        stmt = insert(forums_table).values(**forum_dict).returning(forums_table)
        with storage_errors():
            result = await self.session.execute(stmt)
        return row_to_forum(result.one()._asdict())
