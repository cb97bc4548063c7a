"""Post use cases."""

from .create_posts import (
    CreatePostsRequest,
    CreatePostsResponse,
    CreatePostsUseCase,
    NewPost,
)
from .get_post_details import (
    GetPostDetailsRequest,
    GetPostDetailsResponse,
    GetPostDetailsUseCase,
    RelatedEntity,
)
from .list_thread_posts import (
    ListThreadPostsRequest,
    ListThreadPostsResponse,
    ListThreadPostsUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostsRequest",
    "CreatePostsResponse",
    "CreatePostsUseCase",
    "NewPost",
    "GetPostDetailsRequest",
    "GetPostDetailsResponse",
    "GetPostDetailsUseCase",
    "RelatedEntity",
    "ListThreadPostsRequest",
    "ListThreadPostsResponse",
    "ListThreadPostsUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
