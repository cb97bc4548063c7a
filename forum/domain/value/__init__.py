"""Domain value objects for the forum."""

from forum.domain.value.identifiers import ForumSlug, Nickname, PostId, ThreadId
from forum.domain.value.path import PostPath
from forum.domain.value.types import (
    Page,
    PostCursor,
    PostSortMode,
    ThreadKey,
    ThreadPage,
    UserPage,
)

__all__ = [
    # Identifiers
    "PostId",
    "ThreadId",
    "Nickname",
    "ForumSlug",
    # Types
    "PostPath",
    "PostSortMode",
    "PostCursor",
    "Page",
    "ThreadPage",
    "UserPage",
    "ThreadKey",
]
