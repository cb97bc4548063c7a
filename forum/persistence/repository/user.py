"""PostgreSQL implementation of User repository."""

from typing import List, Optional

from sqlalchemy import func, insert, or_, select, union, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import ForumSlug, Nickname, UserPage
from forum.persistence.errors import storage_errors
from forum.persistence.mappers import row_to_user, user_to_dict
from forum.persistence.tables import posts_table, threads_table, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by nickname."""
        stmt = select(users_table).where(users_table.c.nickname == nickname)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_conflicting(self, nickname: Nickname, email: str) -> List[User]:
        """Find users clashing on nickname or email, nickname match first."""
        stmt = select(users_table).where(
            or_(users_table.c.nickname == nickname, users_table.c.email == email)
        )
        result = await self.session.execute(stmt)
        users = [row_to_user(row._asdict()) for row in result.fetchall()]
        return sorted(users, key=lambda u: u.nickname != nickname)

    async def save(self, user: User) -> User:
        """Insert a user."""
        stmt = insert(users_table).values(**user_to_dict(user))
        with storage_errors():
            await self.session.execute(stmt)
        return user

    async def update(self, user: User) -> Optional[User]:
        """Overwrite profile fields of an existing user."""
        stmt = (
            update(users_table)
            .where(users_table.c.nickname == user.nickname)
            .values(fullname=user.fullname, about=user.about, email=user.email)
            .returning(users_table)
        )
        with storage_errors():
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_user(row._asdict()) if row else None

    async def find_by_forum(self, forum: ForumSlug, page: UserPage) -> List[User]:
        """Find distinct thread and post authors of a forum."""
        authors = union(
            select(threads_table.c.author.label("nickname")).where(
                func.lower(threads_table.c.forum) == func.lower(forum)
            ),
            select(posts_table.c.author.label("nickname")).where(
                func.lower(posts_table.c.forum) == func.lower(forum)
            ),
        ).subquery()

        stmt = select(users_table).where(
            users_table.c.nickname.in_(select(authors.c.nickname))
        )

        # Authors are ordered and paged by lower-cased nickname
        key = func.lower(users_table.c.nickname)
        if page.since is not None:
            since = func.lower(page.since)
            stmt = stmt.where(key < since if page.desc else key > since)

        stmt = stmt.order_by(key.desc() if page.desc else key)
        if page.limit:
            stmt = stmt.limit(page.limit)

        result = await self.session.execute(stmt)
        return [row_to_user(row._asdict()) for row in result.fetchall()]
