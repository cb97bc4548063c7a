"""Unit tests for VoteService and StatusService."""

import pytest

from forum.domain.error import MissingReferenceError
from forum.domain.model import PostDraft, Vote
from forum.domain.service import (
    CreateOutcome,
    PostService,
    StatusService,
    ThreadService,
    VoteService,
)
from forum.domain.value import Nickname, ThreadId, ThreadKey
from forum.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import seed_user, seed_world
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestVote:
    """Tests for vote method."""

    @pytest.mark.asyncio
    async def test_first_vote_is_created_and_counted(self, unit_env):
        thread = await seed_world(unit_env)
        service = await unit_env.get(VoteService)

        result = await service.vote(
            Vote(thread=thread.id, nickname=Nickname("alice"), voice=1)
        )

        assert result.outcome is CreateOutcome.CREATED
        threads = await unit_env.get(ThreadService)
        assert (await threads.get_by_key(ThreadKey(id=thread.id))).votes == 1

    @pytest.mark.asyncio
    async def test_second_vote_replaces_first(self, unit_env):
        thread = await seed_world(unit_env)
        service = await unit_env.get(VoteService)
        database = await unit_env.get(InMemoryDatabase)

        await service.vote(Vote(thread=thread.id, nickname=Nickname("alice"), voice=1))
        result = await service.vote(
            Vote(thread=thread.id, nickname=Nickname("alice"), voice=-1)
        )

        assert result.outcome is CreateOutcome.UPDATED
        assert result.value.voice == -1
        assert list(database.votes.values()) == [result.value]
        threads = await unit_env.get(ThreadService)
        assert (await threads.get_by_key(ThreadKey(id=thread.id))).votes == -1

    @pytest.mark.asyncio
    async def test_tally_sums_all_voters(self, unit_env):
        thread = await seed_world(unit_env)
        await seed_user(unit_env, "bob")
        await seed_user(unit_env, "carol")
        service = await unit_env.get(VoteService)

        for nickname, voice in (("alice", 1), ("bob", 1), ("carol", -1)):
            await service.vote(
                Vote(thread=thread.id, nickname=Nickname(nickname), voice=voice)
            )

        threads = await unit_env.get(ThreadService)
        assert (await threads.get_by_key(ThreadKey(id=thread.id))).votes == 1

    @pytest.mark.asyncio
    async def test_unknown_voter_is_missing_reference(self, unit_env):
        thread = await seed_world(unit_env)
        service = await unit_env.get(VoteService)

        with pytest.raises(MissingReferenceError) as exc_info:
            await service.vote(
                Vote(thread=thread.id, nickname=Nickname("ghost"), voice=1)
            )

        assert exc_info.value.resource == "User"

    @pytest.mark.asyncio
    async def test_unknown_thread_is_missing_reference(self, unit_env):
        await seed_user(unit_env)
        service = await unit_env.get(VoteService)

        with pytest.raises(MissingReferenceError) as exc_info:
            await service.vote(
                Vote(thread=ThreadId(404), nickname=Nickname("alice"), voice=1)
            )

        assert exc_info.value.resource == "Thread"


class TestStatus:
    """Tests for StatusService."""

    @pytest.mark.asyncio
    async def test_status_counts_rows(self, unit_env):
        thread = await seed_world(unit_env)
        posts = await unit_env.get(PostService)
        await posts.create_posts(
            thread,
            [
                PostDraft(author=Nickname("alice"), message="one"),
                PostDraft(author=Nickname("alice"), message="two"),
            ],
        )
        service = await unit_env.get(StatusService)

        status = await service.get_status()

        assert (status.users, status.forums, status.threads, status.posts) == (
            1,
            1,
            1,
            2,
        )

    @pytest.mark.asyncio
    async def test_clear_empties_everything(self, unit_env):
        await seed_world(unit_env)
        service = await unit_env.get(StatusService)

        await service.clear()

        status = await service.get_status()
        assert (status.users, status.forums, status.threads, status.posts) == (
            0,
            0,
            0,
            0,
        )
