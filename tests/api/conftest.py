"""API test fixtures: isolated app + empty TableStore + async test client.

Invariants:
    - Every test gets a fresh app with its own empty store
    - Lifespan is not run by ASGITransport, so nothing is seeded
"""

import pytest
from httpx import ASGITransport, AsyncClient

from routelist.config import Settings
from routelist.core.table_store import TableStore
from routelist.main import create_app


@pytest.fixture
def store():
    return TableStore()


@pytest.fixture
def settings():
    return Settings(environment="production", seed_sample_data=False)


@pytest.fixture
def app(settings, store):
    return create_app(settings=settings, store=store)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
