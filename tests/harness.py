"""Fixture factory shared by unit and integration tests.

Unmocked components talk to real services (postgres, OpenIM, SMTP) that must
already be running; settings come from the environment or ``.env``.
"""

import pytest_asyncio

from desk.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Create a fixture yielding a REQUEST-scoped container.

    Each test gets its own container, so mock clients and in-memory
    repositories start empty.

    Args:
        unmock: Components to run with their production implementation

    Returns:
        Async pytest fixture yielding an AsyncContainer

    Usage:
        unit_env = create_env_fixture()
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_register(unit_env):
            use_case = await unit_env.get(RegisterStaffUseCase)
            ...
    """

    @pytest_asyncio.fixture
    async def _env():
        container = build_test_container(unmock=unmock or set())
        async with container() as request_container:
            yield request_container
        await container.close()

    return _env
