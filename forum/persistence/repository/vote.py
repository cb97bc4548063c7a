"""PostgreSQL implementation of Vote repository."""

from typing import Optional

from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Vote
from forum.domain.repository import VoteRepository
from forum.domain.value import Nickname, ThreadId
from forum.persistence.errors import storage_errors
from forum.persistence.mappers import row_to_vote, vote_to_dict
from forum.persistence.tables import threads_table, votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find(self, thread_id: ThreadId, nickname: Nickname) -> Optional[Vote]:
        """Find a user's vote on a thread."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.thread == thread_id,
                votes_table.c.nickname == nickname,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def _recount(self, thread_id: ThreadId) -> None:
        """Set the thread's tally to the sum of its votes."""
        total = (
            select(func.coalesce(func.sum(votes_table.c.voice), 0))
            .where(votes_table.c.thread == thread_id)
            .scalar_subquery()
        )
        await self.session.execute(
            update(threads_table)
            .where(threads_table.c.id == thread_id)
            .values(votes=total)
        )

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote and recount the thread's tally."""
        with storage_errors():
            await self.session.execute(insert(votes_table).values(**vote_to_dict(vote)))
            await self._recount(vote.thread)
        return vote

    async def update(self, vote: Vote) -> Optional[Vote]:
        """Change a vote's voice and recount the thread's tally."""
        stmt = (
            update(votes_table)
            .where(
                and_(
                    votes_table.c.thread == vote.thread,
                    votes_table.c.nickname == vote.nickname,
                )
            )
            .values(voice=vote.voice)
            .returning(votes_table)
        )
        with storage_errors():
            result = await self.session.execute(stmt)
            row = result.fetchone()
            if row is None:
                return None
            await self._recount(vote.thread)
        return row_to_vote(row._asdict())
