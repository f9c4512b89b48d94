"""
Products API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures:
    ├── mock_db_session: Mock AsyncSession for service unit tests
    ├── sample_product_data: Attributes of a stored product row
    ├── valid_payload: A request body that passes validation
    ├── database: Database over an in-memory SQLite pool, schema created
    └── test_client: HTTPX AsyncClient bound to an app using `database`
"""

import os
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

# Must be set before app.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from app.database import Base, Database
from app.models.product import Product  # noqa: F401  (registers the table)


# ══════════════════════════════════════════════════════════════════════════
# Unit-test Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = row
        result = await product_service.get_product(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_product_data():
    """Attributes of a product as it would be loaded from the store."""
    return {
        "id": 1,
        "name": "Pen",
        "brand": "Acme",
        "category": "Office",
        "price": 1.5,
        "description": "Blue ink",
        "created_at": datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc),
    }


@pytest.fixture
def valid_payload():
    return {
        "name": "Pen",
        "brand": "Acme",
        "category": "Office",
        "price": 1.5,
        "description": "Blue ink",
    }


# ══════════════════════════════════════════════════════════════════════════
# API Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """
    A Database over a private in-memory SQLite store.

    StaticPool keeps a single connection so every session sees the same
    in-memory database. The products table is created from ORM metadata.
    """
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    db = Database(engine)
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def test_client(database):
    """
    HTTPX AsyncClient routed straight into a fresh app instance.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/products")
            assert response.status_code == 200
    """
    from app.main import create_app

    app = create_app(database=database)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
