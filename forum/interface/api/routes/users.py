"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from forum.application.usecase.items import UserItem
from forum.application.usecase.user import (
    CreateUserRequest,
    CreateUserUseCase,
    GetUserProfileRequest,
    GetUserProfileUseCase,
    UpdateUserProfileRequest,
    UpdateUserProfileUseCase,
)
from forum.domain.error import DomainError
from forum.interface.error import to_http_exception

router = APIRouter(prefix="/api/user", tags=["users"], route_class=DishkaRoute)


class UserProfileBody(BaseModel):
    """Profile fields in a request body."""

    fullname: str | None = None
    about: str | None = None
    email: str | None = None


class NewUserBody(BaseModel):
    """Body of a create user request."""

    fullname: str
    about: str = ""
    email: str


@router.post(
    "/{nickname}/create",
    response_model=UserItem | list[UserItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    nickname: str,
    body: NewUserBody,
    response: Response,
    create_user_use_case: FromDishka[CreateUserUseCase],
) -> UserItem | list[UserItem]:
    """Register a user.

    Returns:
        The new user (201), or the users holding the nickname or email (409)
    """
    try:
        result = await create_user_use_case.execute(
            CreateUserRequest(nickname=nickname, **body.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.created:
        return result.users[0]

    response.status_code = status.HTTP_409_CONFLICT
    return result.users


@router.get("/{nickname}/profile", response_model=UserItem)
async def get_user_profile(
    nickname: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
) -> UserItem:
    """Get a user's profile."""
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(nickname=nickname)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{nickname}/profile", response_model=UserItem)
async def update_user_profile(
    nickname: str,
    body: UserProfileBody,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
) -> UserItem:
    """Update a user's profile.

    Raises:
        HTTPException: 404 if the user does not exist,
            409 if the email belongs to another user
    """
    try:
        return await update_user_profile_use_case.execute(
            UpdateUserProfileRequest(nickname=nickname, **body.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e)
