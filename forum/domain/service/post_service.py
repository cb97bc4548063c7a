"""Post domain service.

Posts are created in batches and read back in one of three orders:

- ``flat``: by post id;
- ``tree``: depth-first, each post right after its parent;
- ``parent_tree``: like ``tree``, but paged by whole root subtrees.

Pagination is keyset based. ``since`` names the last post a client has
seen; for the two tree orders its path is looked up so the next page can
start right after it.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

import logfire

from forum.domain.error import NotFoundError, StorageError, UnknownCursorError
from forum.domain.model import Post, PostDraft, Thread
from forum.domain.repository import PostRepository, TransactionManager
from forum.domain.value import PostCursor, PostId, PostPath, PostSortMode, ThreadId

from .base import Service
from .mutation import classify_storage_error, log_classified


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self, post_repository: PostRepository, transactions: TransactionManager
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            transactions: Transaction manager of the current request
        """
        self.post_repository = post_repository
        self.transactions = transactions

    async def create_posts(
        self, thread: Thread, drafts: Sequence[PostDraft]
    ) -> list[Post]:
        """Insert a batch of posts into a thread, all or nothing.

        All posts share one creation timestamp. A parent may be any post of
        the same thread, including one created earlier in this batch.

        Args:
            thread: Resolved owning thread
            drafts: Posts to create, in order

        Returns:
            Created posts, in input order

        Raises:
            InvalidParentError: If a parent is not a post of this thread
            MissingReferenceError: If an author does not exist
            StorageFailureError: On any other storage failure
        """
        if not drafts:
            return []

        with logfire.span(
            "post_service.create_posts", thread_id=thread.id, count=len(drafts)
        ):
            created = datetime.now(timezone.utc)
            try:
                async with self.transactions.transaction():
                    posts = await self.post_repository.save_batch(
                        thread, drafts, created
                    )
            except StorageError as e:
                error = classify_storage_error(e, "Post")
                log_classified(error, "Post")
                raise error from e

            logfire.info(
                "Posts created",
                thread_id=thread.id,
                forum=thread.forum,
                count=len(posts),
            )
            return posts

    async def list_posts(
        self,
        thread_id: ThreadId,
        mode: PostSortMode = PostSortMode.FLAT,
        cursor: Optional[PostCursor] = None,
    ) -> list[Post]:
        """List a thread's posts in the given order.

        Args:
            thread_id: Thread whose posts to list
            mode: Traversal order
            cursor: Keyset, limit and direction

        Returns:
            Posts in traversal order. In ``parent_tree`` mode the limit
            counts root posts and whole subtrees are returned.

        Raises:
            UnknownCursorError: If ``since`` names no post of this thread
                in a tree order
        """
        cursor = cursor or PostCursor()
        with logfire.span(
            "post_service.list_posts",
            thread_id=thread_id,
            mode=mode.value,
            since=cursor.since,
            limit=cursor.limit,
            desc=cursor.desc,
        ):
            if mode is PostSortMode.FLAT:
                posts = await self.post_repository.find_flat(thread_id, cursor)
            else:
                since_path = await self._resolve_cursor(thread_id, cursor)
                if mode is PostSortMode.TREE:
                    posts = await self.post_repository.find_tree(
                        thread_id, cursor, since_path
                    )
                else:
                    posts = await self.post_repository.find_parent_tree(
                        thread_id, cursor, since_path
                    )

            logfire.info(
                "Posts retrieved for thread",
                thread_id=thread_id,
                mode=mode.value,
                count=len(posts),
            )
            return posts

    async def _resolve_cursor(
        self, thread_id: ThreadId, cursor: PostCursor
    ) -> Optional[PostPath]:
        """Path of the cursor post, None when the cursor has no ``since``."""
        if cursor.since is None:
            return None
        post = await self.post_repository.find_by_id(PostId(cursor.since))
        if not post or post.thread != thread_id:
            logfire.warn(
                "Cursor post not found", thread_id=thread_id, since=cursor.since
            )
            raise UnknownCursorError(cursor.since)
        return post.path

    async def get_by_id(self, post_id: PostId) -> Post:
        """Get post by ID.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_by_id", post_id=post_id):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=post_id)
                raise NotFoundError("Post", str(post_id))
            return post

    async def update_message(self, post_id: PostId, message: Optional[str]) -> Post:
        """Edit a post's message.

        The post is only marked edited when the message actually changes.

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.update_message", post_id=post_id):
            post = await self.get_by_id(post_id)
            if not message or message == post.message:
                return post

            async with self.transactions.transaction():
                updated = await self.post_repository.update_message(post_id, message)
            if not updated:
                raise NotFoundError("Post", str(post_id))
            logfire.info("Post message updated", post_id=post_id)
            return updated
