"""Forum use cases."""

from .create_forum import CreateForumRequest, CreateForumResponse, CreateForumUseCase
from .get_forum import GetForumRequest, GetForumUseCase
from .list_forum_threads import (
    ListForumThreadsRequest,
    ListForumThreadsResponse,
    ListForumThreadsUseCase,
)
from .list_forum_users import (
    ListForumUsersRequest,
    ListForumUsersResponse,
    ListForumUsersUseCase,
)

__all__ = [
    "CreateForumRequest",
    "CreateForumResponse",
    "CreateForumUseCase",
    "GetForumRequest",
    "GetForumUseCase",
    "ListForumThreadsRequest",
    "ListForumThreadsResponse",
    "ListForumThreadsUseCase",
    "ListForumUsersRequest",
    "ListForumUsersResponse",
    "ListForumUsersUseCase",
]
