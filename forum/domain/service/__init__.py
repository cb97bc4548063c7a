"""Domain services for the forum."""

from .base import Service
from .forum_service import ForumService
from .mutation import (
    CreateOutcome,
    CreateResult,
    OptimisticMutation,
    classify_storage_error,
)
from .post_service import PostService
from .status_service import StatusService
from .thread_service import ThreadService
from .user_service import UserService
from .vote_service import VoteService

__all__ = [
    "Service",
    "OptimisticMutation",
    "CreateOutcome",
    "CreateResult",
    "classify_storage_error",
    "UserService",
    "ForumService",
    "ThreadService",
    "PostService",
    "VoteService",
    "StatusService",
]
