"""PostgreSQL implementation of Thread repository."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Thread, ThreadDraft
from forum.domain.repository import ThreadRepository
from forum.domain.value import ForumSlug, ThreadId, ThreadPage
from forum.persistence.errors import storage_errors
from forum.persistence.mappers import row_to_thread
from forum.persistence.tables import forums_table, threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_slug(self, slug: str) -> Optional[Thread]:
        """Find a thread by slug."""
        stmt = select(threads_table).where(threads_table.c.slug == slug)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def save(self, draft: ThreadDraft) -> Thread:
        """Insert a thread and bump the forum's thread counter."""
        stmt = (
            insert(threads_table)
            .values(
                slug=draft.slug,
                author=draft.author,
                forum=draft.forum,
                title=draft.title,
                message=draft.message,
                created=draft.created or datetime.now(timezone.utc),
            )
            .returning(threads_table)
        )
        with storage_errors():
            result = await self.session.execute(stmt)
            thread = row_to_thread(result.one()._asdict())

            # Atomically increment the forum's counter
            await self.session.execute(
                update(forums_table)
                .where(forums_table.c.slug == thread.forum)
                .values(threads=forums_table.c.threads + 1)
            )
        return thread

    async def update(
        self, thread_id: ThreadId, title: str, message: str
    ) -> Optional[Thread]:
        """Replace title and message."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(title=title, message=message)
            .returning(threads_table)
        )
        with storage_errors():
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_forum(self, forum: ForumSlug, page: ThreadPage) -> List[Thread]:
        """Find a forum's threads by creation time, slug matched in any case."""
        stmt = select(threads_table).where(
            func.lower(threads_table.c.forum) == func.lower(forum)
        )

        # Creation time is not unique, so the keyset bound is inclusive
        if page.since is not None:
            if page.desc:
                stmt = stmt.where(threads_table.c.created <= page.since)
            else:
                stmt = stmt.where(threads_table.c.created >= page.since)

        if page.desc:
            stmt = stmt.order_by(threads_table.c.created.desc(), threads_table.c.id.desc())
        else:
            stmt = stmt.order_by(threads_table.c.created, threads_table.c.id)
        if page.limit:
            stmt = stmt.limit(page.limit)

        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]
