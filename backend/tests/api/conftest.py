"""API test fixtures — FastAPI test client over the in-memory test database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - Each test gets its own RouteCache and a low-cost bcrypt hasher

Design Decisions:
    - httpx AsyncClient + ASGITransport: exercises the real routing, form parsing
      and response translation without a running server
    - follow_redirects left off: the 303 + Location IS the result under test
"""

import pytest
from httpx import ASGITransport, AsyncClient

import dashboard.infrastructure.database as db_module
from dashboard.api.deps import get_password_hasher, get_route_cache
from dashboard.infrastructure.database import DatabaseSessionManager, get_db
from dashboard.infrastructure.password_hashing import BcryptPasswordHasher
from dashboard.infrastructure.view_cache import RouteCache
from dashboard.main import app


@pytest.fixture
def route_cache():
    return RouteCache()


@pytest.fixture
async def client(test_engine, test_session_factory, route_cache):
    """FastAPI test client with DB, cache and hasher dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_route_cache] = lambda: route_cache
    app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(rounds=4)

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def signed_up_user(client):
    """A user created through the API; returns its stored row."""
    res = await client.post("/api/v1/users", data={
        "name": "Grace Hopper", "email": "grace@navy.io", "password": "cobol59",
    })
    assert res.status_code == 303
    listing = (await client.get("/api/v1/users")).json()["users"]
    return next(u for u in listing if u["email"] == "grace@navy.io")
