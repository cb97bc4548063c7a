"""User domain service."""

from typing import Optional

import logfire

from forum.domain.error import ConflictError, NotFoundError, StorageError
from forum.domain.model import User
from forum.domain.repository import UserRepository
from forum.domain.value import ForumSlug, Nickname, UserPage

from .base import Service
from .mutation import CreateResult, OptimisticMutation, classify_storage_error


class UserService(Service):
    """Domain service for user operations."""

    def __init__(
        self, user_repository: UserRepository, mutation: OptimisticMutation
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            mutation: Optimistic create protocol
        """
        self.user_repository = user_repository
        self.mutation = mutation

    async def create_user(self, user: User) -> CreateResult[list[User]]:
        """Register a user.

        On a nickname or email clash nothing is written and the clashing
        users are returned instead, the nickname match first.

        Args:
            user: User to register

        Returns:
            ``[user]`` when created, else the existing clashing users
        """
        with logfire.span("user_service.create_user", nickname=user.nickname):

            async def insert() -> list[User]:
                return [await self.user_repository.save(user)]

            async def existing() -> Optional[list[User]]:
                users = await self.user_repository.find_conflicting(
                    user.nickname, user.email
                )
                return users or None

            return await self.mutation.create(insert, existing, resource="User")

    async def get_by_nickname(self, nickname: Nickname) -> User:
        """Get user by nickname.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_nickname", nickname=nickname):
            user = await self.user_repository.find_by_nickname(nickname)
            if not user:
                logfire.warn("User not found", nickname=nickname)
                raise NotFoundError("User", nickname)
            return user

    async def update_profile(
        self,
        nickname: Nickname,
        fullname: Optional[str] = None,
        about: Optional[str] = None,
        email: Optional[str] = None,
    ) -> User:
        """Update a user's profile.

        Fields that are None or empty keep their current value.

        Args:
            nickname: User to update
            fullname: New full name
            about: New about text
            email: New email

        Returns:
            Updated user

        Raises:
            NotFoundError: If user not found
            ConflictError: If the email belongs to another user
        """
        with logfire.span("user_service.update_profile", nickname=nickname):
            current = await self.get_by_nickname(nickname)
            changes = {
                field: value
                for field, value in (
                    ("fullname", fullname),
                    ("about", about),
                    ("email", email),
                )
                if value
            }
            if not changes:
                return current

            try:
                async with self.mutation.transactions.transaction():
                    updated = await self.user_repository.update(
                        current.model_copy(update=changes)
                    )
            except StorageError as e:
                error = classify_storage_error(e, "User")
                if isinstance(error, ConflictError):
                    logfire.warn("Email already in use", nickname=nickname)
                    raise ConflictError(
                        f"Email {email} is already used by another user"
                    ) from e
                raise error from e

            if not updated:
                raise NotFoundError("User", nickname)
            logfire.info("Profile updated", nickname=nickname, fields=list(changes))
            return updated

    async def list_forum_users(self, forum: ForumSlug, page: UserPage) -> list[User]:
        """Users who wrote a thread or a post in a forum, by nickname."""
        with logfire.span(
            "user_service.list_forum_users",
            forum=forum,
            limit=page.limit,
            desc=page.desc,
        ):
            users = await self.user_repository.find_by_forum(forum, page)
            logfire.info("Forum users retrieved", forum=forum, count=len(users))
            return users
