"""API test fixtures — FastAPI app with a fresh in-memory store per test.

Invariants:
    - Every test gets its own InMemoryUserStore via dependency override
    - Lifespan is not run: the override replaces the startup-initialized store
"""

import pytest
from httpx import ASGITransport, AsyncClient

from signup.infrastructure.user_store import InMemoryUserStore, get_user_store
from signup.main import app


@pytest.fixture
def api_store():
    return InMemoryUserStore()


@pytest.fixture
async def client(api_store):
    app.dependency_overrides[get_user_store] = lambda: api_store
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
