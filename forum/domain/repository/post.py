"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from forum.domain.model.post import Post, PostDraft
from forum.domain.model.thread import Thread
from forum.domain.value import PostCursor, PostId, PostPath, ThreadId


class PostRepository(ABC):
    """Repository for Post entity.

    Reads implement the three traversal orders of a thread. Each read is
    a single query with no locking.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def save_batch(
        self, thread: Thread, drafts: Sequence[PostDraft], created: datetime
    ) -> List[Post]:
        """Insert posts into a thread, in order.

        Every post gets the thread's id and forum, the shared ``created``
        timestamp and a path derived from its parent's. A parent may be a
        post inserted earlier in the same call. The forum's post counter
        grows by the number of posts. Callers wrap this in a transaction.

        Args:
            thread: Owning thread
            drafts: Posts to insert
            created: Timestamp shared by the whole batch

        Returns:
            Inserted posts with generated ids, in input order

        Raises:
            InvalidParentError: If a parent is not a post of this thread
            StorageError: FOREIGN_KEY if an author does not exist
        """
        pass

    @abstractmethod
    async def find_flat(self, thread_id: ThreadId, cursor: PostCursor) -> List[Post]:
        """Posts ordered by id.

        Args:
            thread_id: Thread ID
            cursor: ``since`` compares against post ids

        Returns:
            At most ``cursor.limit`` posts (all when 0)
        """
        pass

    @abstractmethod
    async def find_tree(
        self,
        thread_id: ThreadId,
        cursor: PostCursor,
        since_path: Optional[PostPath] = None,
    ) -> List[Post]:
        """Posts in depth-first order (path, then id).

        Args:
            thread_id: Thread ID
            cursor: Limit and direction
            since_path: Path of the cursor post, None for the range start

        Returns:
            At most ``cursor.limit`` posts (all when 0)
        """
        pass

    @abstractmethod
    async def find_parent_tree(
        self,
        thread_id: ThreadId,
        cursor: PostCursor,
        since_path: Optional[PostPath] = None,
    ) -> List[Post]:
        """Whole subtrees of root posts, paged by root.

        Roots are picked by id in the cursor's direction, after the root
        of ``since_path``; ``cursor.limit`` counts roots, not posts. Each
        selected subtree is returned in full, in ascending path order.

        Args:
            thread_id: Thread ID
            cursor: Root limit and direction
            since_path: Path of the cursor post, None for the range start

        Returns:
            Posts of the selected subtrees
        """
        pass

    @abstractmethod
    async def update_message(self, post_id: PostId, message: str) -> Optional[Post]:
        """Replace a post's message and mark it edited.

        Returns:
            The updated post, or None if it does not exist
        """
        pass
