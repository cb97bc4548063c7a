"""Get user profile use case."""

from pydantic import BaseModel

from forum.application.usecase.items import UserItem
from forum.domain.service import UserService
from forum.domain.value import Nickname


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    nickname: str


class GetUserProfileUseCase:
    """Use case for getting a user's profile by nickname."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetUserProfileRequest) -> UserItem:
        """Execute get user profile flow.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_nickname(Nickname(request.nickname))
        return UserItem.from_domain(user)
