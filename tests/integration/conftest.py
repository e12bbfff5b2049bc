"""
Fixtures for integration tests.

Provides:
- An in-memory SQLite record store
- Test client for the FastAPI app, wired to that store
- Sample data seeding switched off so each test starts from default wallets
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from trakr.core.config import settings
from trakr.core.dependencies import get_record_store
from trakr.domain.interfaces import RecordStore
from trakr.infrastructure.database import DatabaseSessionManager
from trakr.infrastructure.storage import DatabaseRecordStore
from trakr.main import app


# =============================================================================
# Storage Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def no_sample_data(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start every test from empty collections (wallets still get defaults)."""
    monkeypatch.setattr(settings, "seed_sample_data", False)


@pytest_asyncio.fixture
async def session_manager() -> AsyncGenerator[DatabaseSessionManager, None]:
    """Create an in-memory SQLite database with the records table."""
    manager = DatabaseSessionManager()
    manager.init(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await manager.create_tables()

    yield manager

    await manager.close()


@pytest_asyncio.fixture
async def record_store(session_manager: DatabaseSessionManager) -> DatabaseRecordStore:
    return DatabaseRecordStore(session_manager)


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _client_for(store: RecordStore) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_record_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(record_store: DatabaseRecordStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database store.

    The app lifespan does not run under ASGITransport, so the process-wide
    database manager is never touched.
    """
    async for ac in _client_for(record_store):
        yield ac


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def grocery_expense() -> dict:
    """Request body for a food expense paid from the cash wallet."""
    return {
        "amount": 50,
        "date": "2024-03-10T09:30:00",
        "category": "food",
        "type": "expense",
        "payment_method": "Cash",
        "tags": ["essential"],
        "wallet_id": "cash",
        "description": "Groceries",
    }


@pytest.fixture
def salary_income() -> dict:
    """Request body for a salary paid into the bank wallet."""
    return {
        "amount": 3500,
        "date": "2024-03-01T08:00:00",
        "category": "salary",
        "type": "income",
        "payment_method": "Bank Transfer",
        "wallet_id": "bank",
    }
