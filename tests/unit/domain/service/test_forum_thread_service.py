"""Unit tests for ForumService and ThreadService."""

from datetime import datetime, timedelta, timezone

import pytest

from forum.domain.error import MissingReferenceError, NotFoundError
from forum.domain.model import Forum, ThreadDraft
from forum.domain.service import CreateOutcome, ForumService, ThreadService
from forum.domain.value import ForumSlug, Nickname, ThreadKey, ThreadPage
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateForum:
    """Tests for create_forum method."""

    @pytest.mark.asyncio
    async def test_counters_start_at_zero(self, unit_env):
        await seed_user(unit_env)
        service = await unit_env.get(ForumService)

        result = await service.create_forum(
            Forum(
                slug=ForumSlug("pirates"),
                title="Pirates",
                user=Nickname("alice"),
                posts=10,
                threads=3,
            )
        )

        assert result.created
        assert result.value.posts == 0
        assert result.value.threads == 0

    @pytest.mark.asyncio
    async def test_duplicate_slug_returns_existing_forum(self, unit_env):
        await seed_user(unit_env)
        service = await unit_env.get(ForumService)
        first = await seed_forum(unit_env)

        result = await service.create_forum(
            Forum(slug=ForumSlug("pirates"), title="Other", user=Nickname("alice"))
        )

        assert result.outcome is CreateOutcome.CONFLICT
        assert result.value == first

    @pytest.mark.asyncio
    async def test_slug_differing_only_in_case_returns_existing_forum(self, unit_env):
        await seed_user(unit_env)
        service = await unit_env.get(ForumService)
        first = await seed_forum(unit_env)

        result = await service.create_forum(
            Forum(slug=ForumSlug("PIRATES"), title="Other", user=Nickname("alice"))
        )

        assert result.outcome is CreateOutcome.CONFLICT
        assert result.value == first

    @pytest.mark.asyncio
    async def test_lookup_ignores_case(self, unit_env):
        await seed_user(unit_env)
        first = await seed_forum(unit_env, slug="Pirates")
        service = await unit_env.get(ForumService)

        found = await service.get_by_slug(ForumSlug("pIRATES"))

        assert found == first
        assert found.slug == "Pirates"

    @pytest.mark.asyncio
    async def test_unknown_owner_is_missing_reference(self, unit_env):
        service = await unit_env.get(ForumService)

        with pytest.raises(MissingReferenceError) as exc_info:
            await service.create_forum(
                Forum(slug=ForumSlug("pirates"), title="P", user=Nickname("ghost"))
            )

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_unknown_forum_raises(self, unit_env):
        service = await unit_env.get(ForumService)

        with pytest.raises(NotFoundError):
            await service.get_by_slug(ForumSlug("nowhere"))


class TestCreateThread:
    """Tests for create_thread method."""

    @pytest.mark.asyncio
    async def test_thread_bumps_forum_counter(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)

        thread = await seed_thread(unit_env, slug="treasure")

        forum = await (await unit_env.get(ForumService)).get_by_slug(
            ForumSlug("pirates")
        )
        assert thread.id == 1
        assert thread.slug == "treasure"
        assert forum.threads == 1

    @pytest.mark.asyncio
    async def test_duplicate_slug_returns_existing_thread(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)
        first = await seed_thread(unit_env, slug="treasure")
        service = await unit_env.get(ThreadService)

        result = await service.create_thread(
            ThreadDraft(
                slug="treasure",
                author=Nickname("alice"),
                forum=ForumSlug("pirates"),
                title="Again",
                message="Again",
            )
        )

        assert result.outcome is CreateOutcome.CONFLICT
        assert result.value == first

    @pytest.mark.asyncio
    async def test_threads_without_slug_never_conflict(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)

        first = await seed_thread(unit_env)
        second = await seed_thread(unit_env)

        assert first.slug is None
        assert second.id != first.id

    @pytest.mark.asyncio
    async def test_unknown_forum_is_missing_reference(self, unit_env):
        await seed_user(unit_env)
        service = await unit_env.get(ThreadService)

        with pytest.raises(MissingReferenceError) as exc_info:
            await service.create_thread(
                ThreadDraft(
                    author=Nickname("alice"),
                    forum=ForumSlug("nowhere"),
                    title="T",
                    message="M",
                )
            )

        assert exc_info.value.resource == "Forum"


class TestThreadLookupAndUpdate:
    """Tests for get_by_key and update_thread."""

    @pytest.mark.asyncio
    async def test_thread_found_by_id_and_slug(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)
        thread = await seed_thread(unit_env, slug="treasure")
        service = await unit_env.get(ThreadService)

        assert await service.get_by_key(ThreadKey.parse(str(thread.id))) == thread
        assert await service.get_by_key(ThreadKey.parse("treasure")) == thread

    @pytest.mark.asyncio
    async def test_unknown_thread_raises(self, unit_env):
        service = await unit_env.get(ThreadService)

        with pytest.raises(NotFoundError):
            await service.get_by_key(ThreadKey.parse("404"))

    @pytest.mark.asyncio
    async def test_update_keeps_missing_fields(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)
        thread = await seed_thread(unit_env, slug="treasure")
        service = await unit_env.get(ThreadService)

        updated = await service.update_thread(
            ThreadKey.parse("treasure"), title="Found it", message=None
        )

        assert updated.title == "Found it"
        assert updated.message == thread.message


class TestListForumThreads:
    """Tests for list_forum_threads method."""

    @pytest.mark.asyncio
    async def test_threads_ordered_by_creation_with_since(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)
        service = await unit_env.get(ThreadService)
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for day in (2, 0, 1):
            await service.create_thread(
                ThreadDraft(
                    author=Nickname("alice"),
                    forum=ForumSlug("pirates"),
                    title=f"day {day}",
                    message="m",
                    created=base + timedelta(days=day),
                )
            )

        ascending = await service.list_forum_threads(
            ForumSlug("pirates"), ThreadPage()
        )
        descending = await service.list_forum_threads(
            ForumSlug("pirates"),
            ThreadPage(since=base + timedelta(days=1), desc=True, limit=5),
        )

        assert [t.title for t in ascending] == ["day 0", "day 1", "day 2"]
        assert [t.title for t in descending] == ["day 1", "day 0"]

    @pytest.mark.asyncio
    async def test_forum_slug_matched_in_any_case(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)
        thread = await seed_thread(unit_env)
        service = await unit_env.get(ThreadService)

        threads = await service.list_forum_threads(ForumSlug("PiRaTeS"), ThreadPage())

        assert threads == [thread]
