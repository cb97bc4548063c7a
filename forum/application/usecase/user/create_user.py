"""Create user use case."""

from pydantic import BaseModel

from forum.application.usecase.items import UserItem
from forum.domain.model import User
from forum.domain.service import UserService
from forum.domain.value import Nickname


class CreateUserRequest(BaseModel):
    """Create user request."""

    nickname: str
    fullname: str
    about: str = ""
    email: str


class CreateUserResponse(BaseModel):
    """Create user response.

    ``created`` is False when the nickname or email was taken; ``users``
    then holds the users that clash.
    """

    created: bool
    users: list[UserItem]


class CreateUserUseCase:
    """Use case for registering a user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize create user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: CreateUserRequest) -> CreateUserResponse:
        """Execute create user flow.

        Args:
            request: Create user request

        Returns:
            The new user, or the existing users it clashes with
        """
        user = User(
            nickname=Nickname(request.nickname),
            fullname=request.fullname,
            about=request.about,
            email=request.email,
        )
        result = await self.user_service.create_user(user)
        return CreateUserResponse(
            created=result.created,
            users=[UserItem.from_domain(u) for u in result.value],
        )
