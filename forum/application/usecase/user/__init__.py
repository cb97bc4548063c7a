"""User use cases."""

from .create_user import CreateUserRequest, CreateUserResponse, CreateUserUseCase
from .get_user_profile import GetUserProfileRequest, GetUserProfileUseCase
from .update_user_profile import UpdateUserProfileRequest, UpdateUserProfileUseCase

__all__ = [
    "CreateUserRequest",
    "CreateUserResponse",
    "CreateUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileUseCase",
    "UpdateUserProfileRequest",
    "UpdateUserProfileUseCase",
]
