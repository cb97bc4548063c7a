"""Vote entity.

One vote per user per thread; voting again replaces the voice.
"""

from forum.domain.model.common import DomainModel
from forum.domain.value import Nickname, ThreadId


class Vote(DomainModel):
    """A user's voice on a thread, +1 or -1 by convention."""

    thread: ThreadId
    nickname: Nickname
    voice: int
