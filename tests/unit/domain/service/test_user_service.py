"""Unit tests for UserService."""

import pytest

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import User
from forum.domain.service import CreateOutcome, UserService
from forum.domain.value import Nickname
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def make_user(nickname: str, email: str) -> User:
    return User(
        nickname=Nickname(nickname), fullname="Full Name", about="", email=email
    )


class TestCreateUser:
    """Tests for create_user method."""

    @pytest.mark.asyncio
    async def test_new_user_is_created(self, unit_env):
        service = await unit_env.get(UserService)

        result = await service.create_user(make_user("alice", "alice@example.org"))

        assert result.outcome is CreateOutcome.CREATED
        assert [u.nickname for u in result.value] == ["alice"]

    @pytest.mark.asyncio
    async def test_same_request_twice_returns_existing_user(self, unit_env):
        service = await unit_env.get(UserService)
        user = make_user("alice", "alice@example.org")
        await service.create_user(user)

        result = await service.create_user(user)

        assert result.outcome is CreateOutcome.CONFLICT
        assert result.value == [user]

    @pytest.mark.asyncio
    async def test_conflicts_on_nickname_and_email_list_both_users(self, unit_env):
        service = await unit_env.get(UserService)
        await service.create_user(make_user("alice", "alice@example.org"))
        await service.create_user(make_user("bob", "bob@example.org"))

        result = await service.create_user(make_user("bob", "alice@example.org"))

        assert not result.created
        # Nickname match comes first
        assert [u.nickname for u in result.value] == ["bob", "alice"]

    @pytest.mark.asyncio
    async def test_email_conflict_alone_returns_email_owner(self, unit_env):
        service = await unit_env.get(UserService)
        await service.create_user(make_user("alice", "alice@example.org"))

        result = await service.create_user(make_user("carol", "alice@example.org"))

        assert not result.created
        assert [u.nickname for u in result.value] == ["alice"]


class TestGetByNickname:
    """Tests for get_by_nickname method."""

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.get_by_nickname(Nickname("ghost"))


class TestUpdateProfile:
    """Tests for update_profile method."""

    @pytest.mark.asyncio
    async def test_only_given_fields_change(self, unit_env):
        service = await unit_env.get(UserService)
        await seed_user(unit_env, "alice")

        updated = await service.update_profile(Nickname("alice"), about="Sails a lot")

        assert updated.about == "Sails a lot"
        assert updated.fullname == "Alice"
        assert updated.email == "alice@example.org"

    @pytest.mark.asyncio
    async def test_empty_update_returns_current_profile(self, unit_env):
        service = await unit_env.get(UserService)
        user = await seed_user(unit_env, "alice")

        result = await service.update_profile(Nickname("alice"))

        assert result == user

    @pytest.mark.asyncio
    async def test_taken_email_is_conflict(self, unit_env):
        service = await unit_env.get(UserService)
        await seed_user(unit_env, "alice")
        await seed_user(unit_env, "bob")

        with pytest.raises(ConflictError):
            await service.update_profile(Nickname("bob"), email="alice@example.org")

        bob = await service.get_by_nickname(Nickname("bob"))
        assert bob.email == "bob@example.org"

    @pytest.mark.asyncio
    async def test_unknown_user_raises(self, unit_env):
        service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await service.update_profile(Nickname("ghost"), fullname="Ghost")
