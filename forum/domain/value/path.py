"""Materialized ancestry path of a post.

A path lists the ids of a post's ancestors from the thread-level root down
to the post itself. Comparing two paths element by element gives a
depth-first preorder of the thread: a post sorts after its parent and
before the subtree of its parent's next sibling.
"""

from pydantic import field_validator

from forum.domain.value.common import RootValueObject


class PostPath(RootValueObject[tuple[int, ...]]):
    """Ordered ancestor ids, root first, self last."""

    @field_validator("root")
    @classmethod
    def validate_not_empty(cls, v: tuple[int, ...]) -> tuple[int, ...]:
        """A path always contains at least the post itself."""
        if not v:
            raise ValueError("Path must contain at least one post id")
        return v

    @classmethod
    def for_root(cls, post_id: int) -> "PostPath":
        """Path of a post without a parent."""
        return cls(root=(post_id,))

    def child(self, post_id: int) -> "PostPath":
        """Path of a reply with the given id to the post owning this path."""
        return PostPath(root=(*self.root, post_id))

    @property
    def root_id(self) -> int:
        """Id of the top-level post this path descends from."""
        return self.root[0]

    @property
    def post_id(self) -> int:
        """Id of the post owning this path."""
        return self.root[-1]

    @property
    def depth(self) -> int:
        """Nesting level, 0 for root posts."""
        return len(self.root) - 1

    def is_ancestor_of(self, other: "PostPath") -> bool:
        """Whether ``other`` lies strictly inside this path's subtree."""
        return len(other.root) > len(self.root) and other.root[: len(self.root)] == (
            self.root
        )

    def __lt__(self, other: "PostPath") -> bool:
        return self.root < other.root

    def __gt__(self, other: "PostPath") -> bool:
        return self.root > other.root
