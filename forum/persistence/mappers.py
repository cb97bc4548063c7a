"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import Forum, Post, Thread, User, Vote
from forum.domain.value import (
    ForumSlug,
    Nickname,
    PostId,
    PostPath,
    ThreadId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        nickname=Nickname(row["nickname"]),
        fullname=row["fullname"],
        about=row.get("about") or "",
        email=row["email"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_forum(row: Dict[str, Any]) -> Forum:
    """Convert database row to Forum domain model."""
    return Forum(
        slug=ForumSlug(row["slug"]),
        title=row["title"],
        user=Nickname(row["user"]),
        posts=row["posts"],
        threads=row["threads"],
    )


def forum_to_dict(forum: Forum) -> Dict[str, Any]:
    """Convert Forum domain model to database dict."""
    return forum.model_dump()


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model."""
    return Thread(
        id=ThreadId(row["id"]),
        slug=row.get("slug"),
        author=Nickname(row["author"]),
        forum=ForumSlug(row["forum"]),
        title=row["title"],
        message=row["message"],
        created=row["created"],
        votes=row["votes"],
    )


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict; ``path`` is a list of ints

    Returns:
        Post domain model
    """
    parent = row.get("parent")
    return Post(
        id=PostId(row["id"]),
        author=Nickname(row["author"]),
        created=row["created"],
        forum=ForumSlug(row["forum"]),
        thread=ThreadId(row["thread"]),
        message=row["message"],
        parent=PostId(parent) if parent is not None else None,
        is_edited=row["is_edited"],
        path=PostPath(root=tuple(row["path"])),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The path is stored as a plain list for the BIGINT[] column.
    """
    post_dict = post.model_dump(exclude={"path"})
    post_dict["path"] = list(post.path.root)
    return post_dict


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        thread=ThreadId(row["thread"]),
        nickname=Nickname(row["nickname"]),
        voice=row["voice"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
