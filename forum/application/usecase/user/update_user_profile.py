"""Update user profile use case."""

from typing import Optional

from pydantic import BaseModel

from forum.application.usecase.items import UserItem
from forum.domain.service import UserService
from forum.domain.value import Nickname


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Missing or empty fields keep their current value.
    """

    nickname: str
    fullname: Optional[str] = None
    about: Optional[str] = None
    email: Optional[str] = None


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserItem:
        """Execute update user profile flow.

        Raises:
            NotFoundError: If user not found
            ConflictError: If the email belongs to another user
        """
        user = await self.user_service.update_profile(
            Nickname(request.nickname),
            fullname=request.fullname,
            about=request.about,
            email=request.email,
        )
        return UserItem.from_domain(user)
