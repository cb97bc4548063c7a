"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL. All writes go through the
request session and are rolled back when the test ends.
"""

import os

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import InvalidParentError, MissingReferenceError
from forum.domain.model import PostDraft, Vote
from forum.domain.service import (
    CreateOutcome,
    ForumService,
    PostService,
    ThreadService,
    VoteService,
)
from forum.domain.value import Nickname, PostCursor, PostId, PostSortMode, ThreadKey
from tests.conftest import seed_forum, seed_thread, seed_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"), reason="needs a PostgreSQL database"
)

integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture
async def isolated_env(integration_env):
    """Request container whose session is rolled back afterwards."""
    session = await integration_env.get(AsyncSession)
    yield integration_env
    await session.rollback()


async def seed(env):
    await seed_user(env, "it_alice")
    await seed_forum(env, "it-pirates", owner="it_alice")
    return await seed_thread(env, forum="it-pirates", author="it_alice")


def draft(parent: int | None = None) -> PostDraft:
    return PostDraft(
        author=Nickname("it_alice"),
        message="Ahoy",
        parent=PostId(parent) if parent else None,
    )


@pytest.mark.asyncio
async def test_paths_follow_parents_within_batch(isolated_env):
    thread = await seed(isolated_env)
    service = await isolated_env.get(PostService)

    (a,) = await service.create_posts(thread, [draft()])
    b, c = await service.create_posts(thread, [draft(a.id), draft()])

    assert a.path.root == (a.id,)
    assert b.path.root == (a.id, b.id)
    assert c.path.root == (c.id,)
    assert b.created == c.created


@pytest.mark.asyncio
async def test_tree_and_parent_tree_orders(isolated_env):
    thread = await seed(isolated_env)
    service = await isolated_env.get(PostService)
    (a,) = await service.create_posts(thread, [draft()])
    (b,) = await service.create_posts(thread, [draft()])
    (a1,) = await service.create_posts(thread, [draft(a.id)])

    tree = await service.list_posts(thread.id, PostSortMode.TREE)
    parent_tree = await service.list_posts(
        thread.id, PostSortMode.PARENT_TREE, PostCursor(limit=1, desc=True)
    )
    flat_desc = await service.list_posts(
        thread.id, PostSortMode.FLAT, PostCursor(desc=True)
    )

    assert [p.id for p in tree] == [a.id, a1.id, b.id]
    assert [p.id for p in parent_tree] == [b.id]
    assert [p.id for p in flat_desc] == [a1.id, b.id, a.id]


@pytest.mark.asyncio
async def test_bad_parent_leaves_no_posts(isolated_env):
    thread = await seed(isolated_env)
    service = await isolated_env.get(PostService)

    with pytest.raises(InvalidParentError):
        await service.create_posts(thread, [draft(), draft(parent=2**40)])

    assert await service.list_posts(thread.id) == []
    forum = await (await isolated_env.get(ForumService)).get_by_slug(thread.forum)
    assert forum.posts == 0


@pytest.mark.asyncio
async def test_unknown_author_is_missing_reference(isolated_env):
    thread = await seed(isolated_env)
    service = await isolated_env.get(PostService)

    with pytest.raises(MissingReferenceError):
        await service.create_posts(
            thread, [PostDraft(author=Nickname("it_ghost"), message="Boo")]
        )


@pytest.mark.asyncio
async def test_vote_upsert_recounts_tally(isolated_env):
    thread = await seed(isolated_env)
    votes = await isolated_env.get(VoteService)
    threads = await isolated_env.get(ThreadService)

    await votes.vote(Vote(thread=thread.id, nickname=Nickname("it_alice"), voice=1))
    result = await votes.vote(
        Vote(thread=thread.id, nickname=Nickname("it_alice"), voice=-1)
    )

    assert result.outcome is CreateOutcome.UPDATED
    assert (await threads.get_by_key(ThreadKey(id=thread.id))).votes == -1
