"""Thread entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from forum.domain.model.common import DomainModel
from forum.domain.value import ForumSlug, Nickname, ThreadId


class Thread(DomainModel):
    """Thread entity.

    A discussion started by ``author`` in ``forum``. ``votes`` is the sum
    of all users' voices on the thread. ``slug`` is optional but unique
    when present.
    """

    id: ThreadId
    slug: Optional[str] = None
    author: Nickname
    forum: ForumSlug
    title: str
    message: str
    created: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    votes: int = 0


class ThreadDraft(DomainModel):
    """Thread as submitted for creation, before the store numbers it."""

    slug: Optional[str] = None
    author: Nickname
    forum: ForumSlug
    title: str
    message: str
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Timestamps without an offset are taken as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v
