"""Test configuration and shared helpers."""

from dishka import AsyncContainer

from forum.domain.model import Forum, Thread, ThreadDraft, User
from forum.domain.service import ForumService, ThreadService, UserService
from forum.domain.value import ForumSlug, Nickname


async def seed_user(env: AsyncContainer, nickname: str = "alice") -> User:
    """Create a user with an email derived from the nickname."""
    service = await env.get(UserService)
    result = await service.create_user(
        User(
            nickname=Nickname(nickname),
            fullname=nickname.title(),
            about="",
            email=f"{nickname}@example.org",
        )
    )
    return result.value[0]


async def seed_forum(
    env: AsyncContainer, slug: str = "pirates", owner: str = "alice"
) -> Forum:
    """Create a forum owned by an existing user."""
    service = await env.get(ForumService)
    result = await service.create_forum(
        Forum(slug=ForumSlug(slug), title=slug.title(), user=Nickname(owner))
    )
    return result.value


async def seed_thread(
    env: AsyncContainer,
    forum: str = "pirates",
    author: str = "alice",
    slug: str | None = None,
    title: str = "Treasure",
) -> Thread:
    """Create a thread in an existing forum."""
    service = await env.get(ThreadService)
    result = await service.create_thread(
        ThreadDraft(
            slug=slug,
            author=Nickname(author),
            forum=ForumSlug(forum),
            title=title,
            message="Where is it?",
        )
    )
    return result.value


async def seed_world(env: AsyncContainer) -> Thread:
    """A user, a forum and one thread in it."""
    await seed_user(env)
    await seed_forum(env)
    return await seed_thread(env)
