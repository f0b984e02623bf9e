"""API test fixtures — FastAPI test client over a fresh in-memory storage.

Invariants:
    - Every test gets its own empty Storage
    - get_storage dependency overridden; the `storage` fixture is the same
      instance the routes see, so tests can seed or inspect it directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tcg_api.infrastructure.memory_store import get_storage, new_memory_storage
from tcg_api.main import app


@pytest.fixture
def storage():
    return new_memory_storage()


@pytest.fixture
async def client(storage):
    """FastAPI test client with storage dependency overridden."""
    app.dependency_overrides[get_storage] = lambda: storage

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
