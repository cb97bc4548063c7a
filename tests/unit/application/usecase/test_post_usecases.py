"""Unit tests for the post use cases."""

import pytest

from forum.application.usecase.post import (
    CreatePostsRequest,
    CreatePostsUseCase,
    GetPostDetailsRequest,
    GetPostDetailsUseCase,
    ListThreadPostsRequest,
    ListThreadPostsUseCase,
    NewPost,
    RelatedEntity,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.domain.error import InvalidParentError, NotFoundError
from forum.domain.value import PostSortMode
from tests.conftest import seed_forum, seed_thread, seed_user, seed_world
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreatePostsUseCase:
    """Tests for CreatePostsUseCase."""

    @pytest.mark.asyncio
    async def test_thread_resolved_by_slug(self, unit_env):
        await seed_user(unit_env)
        await seed_forum(unit_env)
        thread = await seed_thread(unit_env, slug="treasure")
        use_case = await unit_env.get(CreatePostsUseCase)

        response = await use_case.execute(
            CreatePostsRequest(
                slug_or_id="treasure",
                posts=[NewPost(author="alice", message="Ahoy")],
            )
        )

        assert len(response.posts) == 1
        assert response.posts[0].thread == thread.id
        assert response.posts[0].forum == "pirates"

    @pytest.mark.asyncio
    async def test_zero_parent_means_root(self, unit_env):
        thread = await seed_world(unit_env)
        use_case = await unit_env.get(CreatePostsUseCase)

        response = await use_case.execute(
            CreatePostsRequest(
                slug_or_id=str(thread.id),
                posts=[NewPost(author="alice", message="Ahoy", parent=0)],
            )
        )

        assert response.posts[0].parent is None

    @pytest.mark.asyncio
    async def test_unknown_thread_reported_even_for_empty_batch(self, unit_env):
        use_case = await unit_env.get(CreatePostsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(CreatePostsRequest(slug_or_id="nowhere", posts=[]))

    @pytest.mark.asyncio
    async def test_empty_batch_on_known_thread(self, unit_env):
        thread = await seed_world(unit_env)
        use_case = await unit_env.get(CreatePostsUseCase)

        response = await use_case.execute(
            CreatePostsRequest(slug_or_id=str(thread.id), posts=[])
        )

        assert response.posts == []

    @pytest.mark.asyncio
    async def test_missing_parent_fails_batch(self, unit_env):
        thread = await seed_world(unit_env)
        use_case = await unit_env.get(CreatePostsUseCase)

        with pytest.raises(InvalidParentError):
            await use_case.execute(
                CreatePostsRequest(
                    slug_or_id=str(thread.id),
                    posts=[
                        NewPost(author="alice", message="Root"),
                        NewPost(author="alice", message="Reply", parent=42),
                    ],
                )
            )


class TestListThreadPostsUseCase:
    """Tests for ListThreadPostsUseCase."""

    @pytest.mark.asyncio
    async def test_unknown_thread_is_not_found(self, unit_env):
        use_case = await unit_env.get(ListThreadPostsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListThreadPostsRequest(slug_or_id="404"))

    @pytest.mark.asyncio
    async def test_tree_listing(self, unit_env):
        thread = await seed_world(unit_env)
        create = await unit_env.get(CreatePostsUseCase)
        await create.execute(
            CreatePostsRequest(
                slug_or_id=str(thread.id),
                posts=[
                    NewPost(author="alice", message="A"),
                    NewPost(author="alice", message="B", parent=1),
                    NewPost(author="alice", message="C"),
                ],
            )
        )
        use_case = await unit_env.get(ListThreadPostsUseCase)

        response = await use_case.execute(
            ListThreadPostsRequest(
                slug_or_id=str(thread.id), sort=PostSortMode.TREE, desc=True
            )
        )

        assert [p.message for p in response.posts] == ["C", "B", "A"]


class TestPostDetailsUseCases:
    """Tests for GetPostDetailsUseCase and UpdatePostUseCase."""

    @pytest.mark.asyncio
    async def test_related_entities_only_when_asked(self, unit_env):
        thread = await seed_world(unit_env)
        create = await unit_env.get(CreatePostsUseCase)
        await create.execute(
            CreatePostsRequest(
                slug_or_id=str(thread.id),
                posts=[NewPost(author="alice", message="A")],
            )
        )
        use_case = await unit_env.get(GetPostDetailsUseCase)

        bare = await use_case.execute(GetPostDetailsRequest(post_id=1))
        full = await use_case.execute(
            GetPostDetailsRequest(
                post_id=1,
                related=[RelatedEntity.USER, RelatedEntity.THREAD, RelatedEntity.FORUM],
            )
        )

        assert bare.author is None and bare.forum is None and bare.thread is None
        assert full.author.nickname == "alice"
        assert full.forum.posts == 1
        assert full.thread.id == thread.id

    @pytest.mark.asyncio
    async def test_update_post_marks_edited(self, unit_env):
        thread = await seed_world(unit_env)
        create = await unit_env.get(CreatePostsUseCase)
        await create.execute(
            CreatePostsRequest(
                slug_or_id=str(thread.id),
                posts=[NewPost(author="alice", message="A")],
            )
        )
        use_case = await unit_env.get(UpdatePostUseCase)

        item = await use_case.execute(UpdatePostRequest(post_id=1, message="B"))

        assert item.message == "B"
        assert item.is_edited
