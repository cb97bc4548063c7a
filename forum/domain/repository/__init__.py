"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.forum import ForumRepository
from forum.domain.repository.post import PostRepository
from forum.domain.repository.status import StatusRepository
from forum.domain.repository.thread import ThreadRepository
from forum.domain.repository.transaction import TransactionManager
from forum.domain.repository.user import UserRepository
from forum.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "ForumRepository",
    "ThreadRepository",
    "PostRepository",
    "VoteRepository",
    "StatusRepository",
    "TransactionManager",
]
