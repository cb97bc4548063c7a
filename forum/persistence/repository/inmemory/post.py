"""In-memory post repository for testing.

Applies the same orderings as the SQL queries, with ``PostPath`` tuples
standing in for the BIGINT[] column.
"""

from datetime import datetime
from typing import Optional, Sequence

from forum.domain.error import InvalidParentError
from forum.domain.model.post import Post, PostDraft
from forum.domain.model.thread import Thread
from forum.domain.repository.post import PostRepository
from forum.domain.value import PostCursor, PostId, PostPath, ThreadId

from .database import InMemoryDatabase


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self, database: InMemoryDatabase) -> None:
        self._db = database

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._db.posts.get(post_id)

    def _thread_posts(self, thread_id: ThreadId) -> list[Post]:
        return [p for p in self._db.posts.values() if p.thread == thread_id]

    async def save_batch(
        self, thread: Thread, drafts: Sequence[PostDraft], created: datetime
    ) -> list[Post]:
        """Insert posts, resolving each path from its parent's."""
        posts: list[Post] = []
        for draft in drafts:
            post_id = PostId(self._db.next_post_id())
            if draft.parent is None:
                path = PostPath.for_root(post_id)
            else:
                parent = self._db.posts.get(draft.parent)
                if parent is None or parent.thread != thread.id:
                    raise InvalidParentError(draft.parent, thread.id)
                path = parent.path.child(post_id)

            self._db.require_user(draft.author, "posts_author_fkey")
            self._db.require_thread(thread.id, "posts_thread_fkey")

            post = Post(
                id=post_id,
                author=draft.author,
                created=created,
                forum=thread.forum,
                thread=thread.id,
                message=draft.message,
                parent=draft.parent,
                is_edited=False,
                path=path,
            )
            # Visible right away so later drafts can reply to it
            self._db.posts[post_id] = post
            posts.append(post)

        forum = self._db.forums.get(thread.forum)
        if forum is not None:
            self._db.forums[forum.slug] = forum.model_copy(
                update={"posts": forum.posts + len(posts)}
            )
        return posts

    async def find_flat(self, thread_id: ThreadId, cursor: PostCursor) -> list[Post]:
        """Posts ordered by id."""
        posts = self._thread_posts(thread_id)

        if cursor.since is not None:
            if cursor.desc:
                posts = [p for p in posts if p.id < cursor.since]
            else:
                posts = [p for p in posts if p.id > cursor.since]

        posts.sort(key=lambda p: p.id, reverse=cursor.desc)
        return posts[: cursor.limit] if cursor.limit else posts

    async def find_tree(
        self,
        thread_id: ThreadId,
        cursor: PostCursor,
        since_path: Optional[PostPath] = None,
    ) -> list[Post]:
        """Posts in depth-first order."""
        posts = self._thread_posts(thread_id)

        if since_path is not None:
            if cursor.desc:
                posts = [p for p in posts if p.path < since_path]
            else:
                posts = [p for p in posts if p.path > since_path]

        posts.sort(key=lambda p: (p.path.root, p.id), reverse=cursor.desc)
        return posts[: cursor.limit] if cursor.limit else posts

    async def find_parent_tree(
        self,
        thread_id: ThreadId,
        cursor: PostCursor,
        since_path: Optional[PostPath] = None,
    ) -> list[Post]:
        """Whole subtrees of a page of root posts."""
        posts = self._thread_posts(thread_id)

        roots = [p.id for p in posts if p.parent is None]
        if since_path is not None:
            if cursor.desc:
                roots = [r for r in roots if r < since_path.root_id]
            else:
                roots = [r for r in roots if r > since_path.root_id]
        roots.sort(reverse=cursor.desc)
        if cursor.limit:
            roots = roots[: cursor.limit]

        rank = {root: i for i, root in enumerate(roots)}
        selected = [p for p in posts if p.root_id in rank]
        selected.sort(key=lambda p: (rank[p.root_id], p.path.root, p.id))
        return selected

    async def update_message(self, post_id: PostId, message: str) -> Optional[Post]:
        """Replace the message and mark the post edited."""
        post = self._db.posts.get(post_id)
        if post is None:
            return None
        updated = post.model_copy(update={"message": message, "is_edited": True})
        self._db.posts[post_id] = updated
        return updated
