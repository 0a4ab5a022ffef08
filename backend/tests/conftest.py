"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Tests never reach a real Postgres: DATABASE_URL points at SQLite before any import
    - Every test gets a fresh in-memory SQLite database (tables from Base.metadata)

Design Decisions:
    - StaticPool: one shared connection, so every session sees the same :memory: DB
"""

import os

# Ensure tests don't accidentally use a real database
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from dashboard.db.base import Base  # noqa: E402
import dashboard.models  # noqa: E402,F401
from dashboard.models.customer import Customer  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def seed_customer(test_db):
    """Insert the customer invoices point at."""
    customer = Customer(name="Evil Rabbit", email="evil@rabbit.io")
    test_db.add(customer)
    await test_db.commit()
    await test_db.refresh(customer)
    return customer
