"""
Centralized Test Configuration.
"""

import os

# Cheap hashes and a fixed key for tests; set before the app reads its settings
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from backoffice.app.main import app
from backoffice.app.core.dependencies import get_store
from backoffice.app.db.bootstrap import init_db
from backoffice.app.db.store import Store

# Setup In-Memory Test Database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "Admin@123"


@pytest.fixture
async def store():
    """Fresh bootstrapped in-memory store for every test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    test_store = Store(engine)
    await init_db(test_store)

    app.dependency_overrides[get_store] = lambda: test_store
    yield test_store

    app.dependency_overrides.clear()
    await test_store.dispose()


@pytest.fixture
async def client(store):
    """Async client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def auth_headers(client):
    """Authorization header of the bootstrapped admin."""
    response = await client.post(
        "/api/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
