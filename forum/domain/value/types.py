"""Domain value objects for the forum.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import Field, field_validator, model_validator

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import ThreadId


class PostSortMode(str, Enum):
    """Traversal order for a thread's posts."""

    FLAT = "flat"  # By post id
    TREE = "tree"  # Depth-first by path
    PARENT_TREE = "parent_tree"  # Paged by root post, full subtrees


class ThreadKey(ValueObject):
    """A thread reference as it arrives at a read boundary.

    Threads are addressed interchangeably by numeric id or by slug.
    Exactly one of the two is set.
    """

    id: Optional[ThreadId] = None
    slug: Optional[str] = None

    @model_validator(mode="after")
    def validate_exactly_one(self) -> "ThreadKey":
        """Validate that exactly one of id or slug is given."""
        if (self.id is None) == (self.slug is None):
            raise ValueError("Thread key needs exactly one of id or slug")
        return self

    @classmethod
    def parse(cls, slug_or_id: str) -> "ThreadKey":
        """Build a key from a path segment: all digits means an id."""
        if slug_or_id.isdigit():
            return cls(id=ThreadId(int(slug_or_id)))
        return cls(slug=slug_or_id)

    def __str__(self) -> str:
        return str(self.id) if self.id is not None else str(self.slug)


class PostCursor(ValueObject):
    """Keyset pagination over a thread's posts.

    ``since`` is the id of the last post the caller has seen; None (or 0,
    which is stored as None) means the start of the range for the chosen
    direction. ``limit`` of 0 means unbounded.
    """

    since: Optional[int] = Field(default=None, ge=0)
    limit: int = Field(default=0, ge=0)
    desc: bool = False

    @field_validator("since")
    @classmethod
    def zero_means_no_cursor(cls, v: Optional[int]) -> Optional[int]:
        """Post ids start at 1, so 0 names no post."""
        return v or None


class Page(ValueObject):
    """Keyset pagination over a forum's threads or users."""

    limit: int = Field(default=0, ge=0)
    desc: bool = False


class ThreadPage(Page):
    """Forum threads page, keyed by creation time."""

    since: Optional[datetime] = None

    @field_validator("since")
    @classmethod
    def assume_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Timestamps without an offset are taken as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class UserPage(Page):
    """Forum users page, keyed by nickname."""

    since: Optional[str] = None
