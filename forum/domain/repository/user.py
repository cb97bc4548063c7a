"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.user import User
from forum.domain.value import ForumSlug, Nickname, UserPage


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_nickname(self, nickname: Nickname) -> Optional[User]:
        """Find a user by nickname.

        Args:
            nickname: The user's nickname

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_conflicting(self, nickname: Nickname, email: str) -> List[User]:
        """Find users whose nickname or email clash with the given ones.

        Args:
            nickname: Nickname to match
            email: Email to match

        Returns:
            At most two users, the nickname match first
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The stored user

        Raises:
            StorageError: UNIQUE if nickname or email is taken
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> Optional[User]:
        """Overwrite the profile of an existing user.

        Args:
            user: The user with new profile fields

        Returns:
            The updated user, or None if no user has that nickname

        Raises:
            StorageError: UNIQUE if the new email belongs to another user
        """
        pass

    @abstractmethod
    async def find_by_forum(self, forum: ForumSlug, page: UserPage) -> List[User]:
        """Find users who authored a thread or a post in a forum.

        Args:
            forum: Forum slug
            page: Nickname keyset, limit and direction

        Returns:
            Distinct users ordered by nickname
        """
        pass
