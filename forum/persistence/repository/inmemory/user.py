"""In-memory user repository for testing."""

from typing import Optional

from forum.domain.error import StorageError, StorageErrorKind
from forum.domain.model.user import User
from forum.domain.repository.user import UserRepository
from forum.domain.value import ForumSlug, Nickname, UserPage

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by nickname."""
        return self._db.users.get(nickname)

    async def find_conflicting(self, nickname: Nickname, email: str) -> list[User]:
        """Find users clashing on nickname or email, nickname match first."""
        users = [
            u
            for u in self._db.users.values()
            if u.nickname == nickname or u.email == email
        ]
        return sorted(users, key=lambda u: u.nickname != nickname)

    def _check_email(self, user: User) -> None:
        for other in self._db.users.values():
            if other.email == user.email and other.nickname != user.nickname:
                raise StorageError(StorageErrorKind.UNIQUE, "users_email_key")

    async def save(self, user: User) -> User:
        """Insert a user.

        Raises:
            StorageError: If nickname or email is taken
        """
        if user.nickname in self._db.users:
            raise StorageError(StorageErrorKind.UNIQUE, "users_pkey")
        self._check_email(user)
        self._db.users[user.nickname] = user
        return user

    async def update(self, user: User) -> Optional[User]:
        """Overwrite profile fields of an existing user."""
        if user.nickname not in self._db.users:
            return None
        self._check_email(user)
        self._db.users[user.nickname] = user
        return user

    async def find_by_forum(self, forum: ForumSlug, page: UserPage) -> list[User]:
        """Find distinct thread and post authors of a forum."""
        wanted = forum.lower()
        nicknames = {
            t.author for t in self._db.threads.values() if t.forum.lower() == wanted
        }
        nicknames |= {
            p.author for p in self._db.posts.values() if p.forum.lower() == wanted
        }

        # Ordered and paged by lower-cased nickname
        if page.since is not None:
            since = page.since.lower()
            if page.desc:
                nicknames = {n for n in nicknames if n.lower() < since}
            else:
                nicknames = {n for n in nicknames if n.lower() > since}

        ordered = sorted(nicknames, key=str.lower, reverse=page.desc)
        if page.limit:
            ordered = ordered[: page.limit]
        return [self._db.users[n] for n in ordered if n in self._db.users]
