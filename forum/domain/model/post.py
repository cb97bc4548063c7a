"""Post entity.

Posts are the replies that make up a thread. Nesting is unlimited and is
tracked through a materialized path of ancestor ids.
"""

from datetime import datetime
from typing import Optional

from forum.domain.model.common import DomainModel
from forum.domain.value import ForumSlug, Nickname, PostId, PostPath, ThreadId


class Post(DomainModel):
    """Post entity.

    Threading is managed through:
    - parent: Direct parent post (None for root posts of the thread)
    - path: Ancestor ids from the root post down to this post, set once
      on insert and never recomputed
    """

    id: PostId
    author: Nickname
    created: datetime
    forum: ForumSlug
    thread: ThreadId
    message: str
    parent: Optional[PostId] = None
    is_edited: bool = False
    path: PostPath

    @property
    def root_id(self) -> int:
        """Id of the root post whose subtree holds this post."""
        return self.path.root_id


class PostDraft(DomainModel):
    """Post as submitted in a batch, before insertion."""

    author: Nickname
    message: str
    parent: Optional[PostId] = None
