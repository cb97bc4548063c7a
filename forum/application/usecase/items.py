"""Response items shared by use cases.

Each item mirrors a domain entity as it is shown to API clients.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from forum.domain.model import Forum, Post, Thread, User


class UserItem(BaseModel):
    """User in responses."""

    nickname: str
    fullname: str
    about: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserItem":
        return cls(
            nickname=user.nickname,
            fullname=user.fullname,
            about=user.about,
            email=user.email,
        )


class ForumItem(BaseModel):
    """Forum in responses."""

    slug: str
    title: str
    user: str
    posts: int
    threads: int

    @classmethod
    def from_domain(cls, forum: Forum) -> "ForumItem":
        return cls(
            slug=forum.slug,
            title=forum.title,
            user=forum.user,
            posts=forum.posts,
            threads=forum.threads,
        )


class ThreadItem(BaseModel):
    """Thread in responses."""

    id: int
    slug: Optional[str]
    author: str
    forum: str
    title: str
    message: str
    created: datetime
    votes: int

    @classmethod
    def from_domain(cls, thread: Thread) -> "ThreadItem":
        return cls(
            id=thread.id,
            slug=thread.slug,
            author=thread.author,
            forum=thread.forum,
            title=thread.title,
            message=thread.message,
            created=thread.created,
            votes=thread.votes,
        )


class PostItem(BaseModel):
    """Post in responses."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    parent: Optional[int]
    author: str
    message: str
    is_edited: bool = Field(alias="isEdited")
    forum: str
    thread: int
    created: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostItem":
        return cls(
            id=post.id,
            parent=post.parent,
            author=post.author,
            message=post.message,
            is_edited=post.is_edited,
            forum=post.forum,
            thread=post.thread,
            created=post.created,
        )
