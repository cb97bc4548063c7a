"""PostgreSQL implementation of Post repository.

Every traversal order is a single statement over the ``(thread, id)`` and
``(thread, path)`` indexes. Paths are BIGINT[] columns, and PostgreSQL
compares arrays element by element, which is exactly depth-first order.
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import InvalidParentError
from forum.domain.model import Post, PostDraft, Thread
from forum.domain.repository import PostRepository
from forum.domain.value import PostCursor, PostId, PostPath, ThreadId
from forum.persistence.errors import storage_errors
from forum.persistence.mappers import post_to_dict, row_to_post
from forum.persistence.tables import forums_table, posts_id_seq, posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        stmt = select(posts_table).where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def _next_ids(self, count: int) -> List[int]:
        """Draw ``count`` ids from the post sequence, ascending."""
        stmt = select(posts_id_seq.next_value()).select_from(
            func.generate_series(1, count)
        )
        result = await self.session.execute(stmt)
        return sorted(result.scalars().all())

    async def _parent_path(
        self, thread_id: ThreadId, parent_id: PostId, known: Dict[int, PostPath]
    ) -> PostPath:
        """Path of a parent post, which must belong to the thread."""
        if parent_id in known:
            return known[parent_id]

        stmt = select(posts_table.c.path).where(
            posts_table.c.id == parent_id, posts_table.c.thread == thread_id
        )
        result = await self.session.execute(stmt)
        path = result.scalar_one_or_none()
        if path is None:
            raise InvalidParentError(parent_id, thread_id)

        known[parent_id] = PostPath(root=tuple(path))
        return known[parent_id]

    async def save_batch(
        self, thread: Thread, drafts: Sequence[PostDraft], created: datetime
    ) -> List[Post]:
        """Insert posts, resolving each path from its parent's."""
        if not drafts:
            return []

        with storage_errors():
            ids = await self._next_ids(len(drafts))

            # Posts from this batch can be parents of later ones
            known: Dict[int, PostPath] = {}
            posts: List[Post] = []
            for post_id, draft in zip(ids, drafts):
                if draft.parent is None:
                    path = PostPath.for_root(post_id)
                else:
                    parent_path = await self._parent_path(
                        thread.id, draft.parent, known
                    )
                    path = parent_path.child(post_id)
                known[post_id] = path

                posts.append(
                    Post(
                        id=PostId(post_id),
                        author=draft.author,
                        created=created,
                        forum=thread.forum,
                        thread=thread.id,
                        message=draft.message,
                        parent=draft.parent,
                        is_edited=False,
                        path=path,
                    )
                )

            await self.session.execute(
                insert(posts_table), [post_to_dict(post) for post in posts]
            )

            # Atomically increment the forum's counter
            await self.session.execute(
                update(forums_table)
                .where(forums_table.c.slug == thread.forum)
                .values(posts=forums_table.c.posts + len(posts))
            )

        return posts

    async def find_flat(self, thread_id: ThreadId, cursor: PostCursor) -> List[Post]:
        """Posts ordered by id."""
        stmt = select(posts_table).where(posts_table.c.thread == thread_id)

        if cursor.since is not None:
            if cursor.desc:
                stmt = stmt.where(posts_table.c.id < cursor.since)
            else:
                stmt = stmt.where(posts_table.c.id > cursor.since)

        order = posts_table.c.id.desc() if cursor.desc else posts_table.c.id
        stmt = stmt.order_by(order)
        if cursor.limit:
            stmt = stmt.limit(cursor.limit)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_tree(
        self,
        thread_id: ThreadId,
        cursor: PostCursor,
        since_path: Optional[PostPath] = None,
    ) -> List[Post]:
        """Posts in depth-first order."""
        stmt = select(posts_table).where(posts_table.c.thread == thread_id)

        if since_path is not None:
            since = list(since_path.root)
            if cursor.desc:
                stmt = stmt.where(posts_table.c.path < since)
            else:
                stmt = stmt.where(posts_table.c.path > since)

        if cursor.desc:
            stmt = stmt.order_by(posts_table.c.path.desc(), posts_table.c.id.desc())
        else:
            stmt = stmt.order_by(posts_table.c.path, posts_table.c.id)
        if cursor.limit:
            stmt = stmt.limit(cursor.limit)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def find_parent_tree(
        self,
        thread_id: ThreadId,
        cursor: PostCursor,
        since_path: Optional[PostPath] = None,
    ) -> List[Post]:
        """Whole subtrees of a page of root posts."""
        roots = select(posts_table.c.id).where(
            posts_table.c.thread == thread_id, posts_table.c.parent.is_(None)
        )

        if since_path is not None:
            if cursor.desc:
                roots = roots.where(posts_table.c.id < since_path.root_id)
            else:
                roots = roots.where(posts_table.c.id > since_path.root_id)

        roots = roots.order_by(
            posts_table.c.id.desc() if cursor.desc else posts_table.c.id
        )
        if cursor.limit:
            roots = roots.limit(cursor.limit)

        root_id = posts_table.c.path[1]
        stmt = select(posts_table).where(
            posts_table.c.thread == thread_id, root_id.in_(roots)
        )

        # Root groups follow the cursor direction, each subtree stays ascending
        if cursor.desc:
            stmt = stmt.order_by(root_id.desc(), posts_table.c.path, posts_table.c.id)
        else:
            stmt = stmt.order_by(posts_table.c.path, posts_table.c.id)

        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def update_message(self, post_id: PostId, message: str) -> Optional[Post]:
        """Replace the message and mark the post edited."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(message=message, is_edited=True)
            .returning(posts_table)
        )
        with storage_errors():
            result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None
