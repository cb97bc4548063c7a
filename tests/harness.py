"""Fixture factory for tests that resolve services from a container.

``create_env_fixture()`` runs everything in memory.
``create_env_fixture(unmock={"persistence"})`` needs PostgreSQL at
``DATABASE__URL`` with migrations applied.
"""

import pytest_asyncio

from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Return a fixture yielding a request-scoped container.

    Example:
        env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_lookup(env):
            users = await env.get(UserService)
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock)
        try:
            async with container() as request_container:
                yield request_container
        finally:
            await container.close()

    return _env
