"""API test fixtures — in-memory repository fake + FastAPI test client.

Invariants:
    - get_repository dependency overridden with FakeCarShopRepository
    - failing_client builds clients whose repository raises a given exception

Design Decisions:
    - Fake over mocks: the routes see real rows and real SQLAlchemy errors,
      so classification in error_handlers is exercised end to end
"""

import pytest
from httpx import ASGITransport, AsyncClient

from car_shop.api.dependencies import get_repository
from car_shop.main import app
from tests.api.fakes import FailingCarShopRepository, FakeCarShopRepository


def _client_for(repo) -> AsyncClient:
    app.dependency_overrides[get_repository] = lambda: repo
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
def fake_repo():
    return FakeCarShopRepository()


@pytest.fixture
async def client(fake_repo):
    """FastAPI test client with the repository dependency overridden."""
    async with _client_for(fake_repo) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def failing_client():
    """Factory: client whose repository raises the given exception."""
    clients = []

    async def _make(error: BaseException) -> AsyncClient:
        c = _client_for(FailingCarShopRepository(error))
        clients.append(c)
        return c

    yield _make
    for c in clients:
        await c.aclose()
    app.dependency_overrides.clear()
