"""initial_schema

Create the forum schema:
- Users (nickname key, unique email)
- Forums (slug key, owner, thread/post counters)
- Threads (optional unique slug, vote tally)
- Posts (nested replies with a materialized BIGINT[] path)
- Votes (one per user per thread)

Revision ID: 3c1f0a7d92e4
Revises:
Create Date: 2026-10-19 10:12:44.318270

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a7d92e4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("nickname", sa.Text(), nullable=False),
        sa.Column("fullname", sa.Text(), nullable=False),
        sa.Column("about", sa.Text(), nullable=False, server_default=""),
        sa.Column("email", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("nickname", name="users_pkey"),
        sa.UniqueConstraint("email", name="users_email_key"),
    )

    # ========================================================================
    # FORUMS table
    # ========================================================================
    op.create_table(
        "forums",
        sa.Column("slug", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("user", sa.Text(), nullable=False),
        sa.Column("posts", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("threads", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(
            ["user"], ["users.nickname"], name="forums_user_fkey", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("slug", name="forums_pkey"),
    )
    # Slugs are looked up in any case, so two may not differ only in case
    op.execute("CREATE UNIQUE INDEX forums_slug_lower_key ON forums (lower(slug))")

    # ========================================================================
    # THREADS table
    # ========================================================================
    op.create_table(
        "threads",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("slug", sa.Text(), nullable=True),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("forum", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column(
            "created",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.ForeignKeyConstraint(
            ["author"],
            ["users.nickname"],
            name="threads_author_fkey",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["forum"], ["forums.slug"], name="threads_forum_fkey", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="threads_pkey"),
        sa.UniqueConstraint("slug", name="threads_slug_key"),
    )
    op.execute(
        "CREATE INDEX idx_threads_forum_created ON threads (lower(forum), created)"
    )
    op.execute("CREATE INDEX idx_threads_forum_author ON threads (lower(forum), author)")

    # ========================================================================
    # POSTS table (materialized path)
    # ========================================================================
    # Ids are drawn before insert so the path can end with the post's own id
    op.execute("CREATE SEQUENCE posts_id_seq")

    op.create_table(
        "posts",
        sa.Column(
            "id",
            sa.BigInteger(),
            server_default=sa.text("nextval('posts_id_seq')"),
            nullable=False,
        ),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("created", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("forum", sa.Text(), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("is_edited", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("parent", sa.BigInteger(), nullable=True),
        sa.Column("thread", sa.Integer(), nullable=False),
        sa.Column("path", postgresql.ARRAY(sa.BigInteger()), nullable=False),
        sa.ForeignKeyConstraint(
            ["author"],
            ["users.nickname"],
            name="posts_author_fkey",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["forum"], ["forums.slug"], name="posts_forum_fkey", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["parent"], ["posts.id"], name="posts_parent_fkey", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["thread"], ["threads.id"], name="posts_thread_fkey", ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id", name="posts_pkey"),
    )
    op.execute("ALTER SEQUENCE posts_id_seq OWNED BY posts.id")

    op.create_index("idx_posts_thread_id", "posts", ["thread", "id"])
    op.create_index("idx_posts_thread_path", "posts", ["thread", "path"])
    op.create_index(
        "idx_posts_thread_parent_id", "posts", ["thread", "parent", "id"]
    )
    # Root lookup for parent_tree pages
    op.execute("CREATE INDEX idx_posts_root ON posts ((path[1]), path)")
    op.execute("CREATE INDEX idx_posts_forum_author ON posts (lower(forum), author)")

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("thread", sa.Integer(), nullable=False),
        sa.Column("nickname", sa.Text(), nullable=False),
        sa.Column("voice", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["thread"], ["threads.id"], name="votes_thread_fkey", ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["nickname"],
            ["users.nickname"],
            name="votes_nickname_fkey",
            ondelete="CASCADE",
        ),
        sa.UniqueConstraint("thread", "nickname", name="votes_thread_nickname_key"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("votes")
    op.execute("DROP INDEX IF EXISTS idx_posts_forum_author")
    op.execute("DROP INDEX IF EXISTS idx_posts_root")
    op.drop_index("idx_posts_thread_parent_id", table_name="posts")
    op.drop_index("idx_posts_thread_path", table_name="posts")
    op.drop_index("idx_posts_thread_id", table_name="posts")
    op.drop_table("posts")
    op.execute("DROP SEQUENCE IF EXISTS posts_id_seq")
    op.execute("DROP INDEX IF EXISTS idx_threads_forum_author")
    op.execute("DROP INDEX IF EXISTS idx_threads_forum_created")
    op.drop_table("threads")
    op.execute("DROP INDEX IF EXISTS forums_slug_lower_key")
    op.drop_table("forums")
    op.drop_table("users")
