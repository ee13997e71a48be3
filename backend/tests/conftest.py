"""
ContactBook Backend: Test Configuration (conftest.py)
=====================================================

What:  Shared pytest fixtures for the test suite.
How:   Service unit tests use a mocked AsyncSession. Endpoint tests run the
       real app (lifespan included) against an on-disk SQLite database
       through aiosqlite, one fresh file per test.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock standing in for AsyncSession
    ├── sample_contact_data: a contact row as a dict
    ├── test_settings: Settings pointing at a temporary SQLite file
    ├── test_app: app with its lifespan entered and tables created
    └── test_client: HTTPX AsyncClient bound to test_app
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# contactbook.main builds a module-level app from the environment on import;
# keep it away from any real database
os.environ["POSTGRES_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_get_contact(mock_db_session):
            mock_db_session.execute.return_value = MagicMock(**{"scalar_one_or_none.return_value": row})
            result = await contact_service.get_contact(mock_db_session, 1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.info = {}
    return session


@pytest.fixture
def sample_contact_data():
    return {"id": 1, "name": "Ada", "email": "ada@x.io"}


@pytest.fixture
def test_settings(tmp_path):
    """Settings for an isolated SQLite database file under tmp_path."""
    from contactbook.config import Settings

    db_file = tmp_path / "contacts.db"
    return Settings(
        postgres_url=f"sqlite+aiosqlite:///{db_file}",
        log_level="WARNING",
        db_statement_timeout=5.0,
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    """
    The application with its lifespan running and the schema created.

    ASGITransport does not send lifespan events, so the fixture enters the
    lifespan itself; the engine is disposed when the test finishes.
    """
    from contactbook.database import Base
    from contactbook.main import create_app, lifespan
    from contactbook.models.contact import Contact  # noqa: F401

    app = create_app(test_settings)
    async with lifespan(app):
        async with app.state.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        yield app


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
