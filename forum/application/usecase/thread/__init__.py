"""Thread use cases."""

from .create_thread import (
    CreateThreadRequest,
    CreateThreadResponse,
    CreateThreadUseCase,
)
from .get_thread import GetThreadRequest, GetThreadUseCase
from .update_thread import UpdateThreadRequest, UpdateThreadUseCase
from .vote_thread import VoteThreadRequest, VoteThreadUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadResponse",
    "CreateThreadUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "UpdateThreadRequest",
    "UpdateThreadUseCase",
    "VoteThreadRequest",
    "VoteThreadUseCase",
]
