"""Strongly typed identifiers for forum domain entities.

Posts and threads are numbered by the store; users and forums are
identified by their natural keys.
"""

from typing import NewType

PostId = NewType("PostId", int)
ThreadId = NewType("ThreadId", int)
Nickname = NewType("Nickname", str)
ForumSlug = NewType("ForumSlug", str)
