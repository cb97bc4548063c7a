"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations. Constraint names are
explicit because write failures are classified by constraint name.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    Sequence,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# Post ids are drawn ahead of insertion so a post's path can include its own id
posts_id_seq = Sequence("posts_id_seq", metadata=metadata)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("nickname", Text, primary_key=True),
    Column("fullname", Text, nullable=False),
    Column("about", Text, nullable=False, server_default=""),
    Column("email", Text, nullable=False),
    UniqueConstraint("email", name="users_email_key"),
)

# ============================================================================
# FORUMS TABLE
# ============================================================================
forums_table = Table(
    "forums",
    metadata,
    Column("slug", Text, primary_key=True),
    Column("title", Text, nullable=False),
    Column(
        "user",
        Text,
        ForeignKey("users.nickname", name="forums_user_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("posts", BigInteger, nullable=False, server_default="0"),
    Column("threads", Integer, nullable=False, server_default="0"),
)
Index("forums_slug_lower_key", func.lower(forums_table.c.slug), unique=True)

# ============================================================================
# THREADS TABLE
# ============================================================================
threads_table = Table(
    "threads",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("slug", Text, nullable=True),  # Optional, unique when set
    Column(
        "author",
        Text,
        ForeignKey("users.nickname", name="threads_author_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "forum",
        Text,
        ForeignKey("forums.slug", name="threads_forum_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", Text, nullable=False),
    Column("message", Text, nullable=False),
    Column(
        "created", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("votes", Integer, nullable=False, server_default="0"),
    UniqueConstraint("slug", name="threads_slug_key"),
)

Index(
    "idx_threads_forum_created",
    func.lower(threads_table.c.forum),
    threads_table.c.created,
)
Index(
    "idx_threads_forum_author",
    func.lower(threads_table.c.forum),
    threads_table.c.author,
)

# ============================================================================
# POSTS TABLE (materialized path for nesting)
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", BigInteger, posts_id_seq, primary_key=True),
    Column(
        "author",
        Text,
        ForeignKey("users.nickname", name="posts_author_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("created", TIMESTAMP(timezone=True), nullable=False),
    Column(
        "forum",
        Text,
        ForeignKey("forums.slug", name="posts_forum_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("message", Text, nullable=False),
    Column("is_edited", Boolean, nullable=False, server_default="false"),
    Column(
        "parent",
        BigInteger,
        ForeignKey("posts.id", name="posts_parent_fkey", ondelete="CASCADE"),
        nullable=True,  # NULL for root posts
    ),
    Column(
        "thread",
        Integer,
        ForeignKey("threads.id", name="posts_thread_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("path", ARRAY(BigInteger), nullable=False),  # Ancestor ids, root first
)

Index("idx_posts_thread_id", posts_table.c.thread, posts_table.c.id)
Index("idx_posts_thread_path", posts_table.c.thread, posts_table.c.path)
Index(
    "idx_posts_thread_parent_id",
    posts_table.c.thread,
    posts_table.c.parent,
    posts_table.c.id,
)
Index("idx_posts_root", posts_table.c.path[1], posts_table.c.path)
Index(
    "idx_posts_forum_author", func.lower(posts_table.c.forum), posts_table.c.author
)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "thread",
        Integer,
        ForeignKey("threads.id", name="votes_thread_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "nickname",
        Text,
        ForeignKey("users.nickname", name="votes_nickname_fkey", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("voice", Integer, nullable=False),
    UniqueConstraint("thread", "nickname", name="votes_thread_nickname_key"),
)
