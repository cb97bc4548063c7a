"""Forum entity."""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import ForumSlug, Nickname


class Forum(DomainModel):
    """Forum entity.

    A forum is owned by a user and groups threads. The ``posts`` and
    ``threads`` counters are maintained by the store when threads and
    posts are created; clients never set them.
    """

    slug: ForumSlug = Field(min_length=1)
    title: str
    user: Nickname
    posts: int = Field(default=0, ge=0)
    threads: int = Field(default=0, ge=0)
