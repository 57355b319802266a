"""
Pytest Configuration and Fixtures
Provides shared fixtures for use-case, repository and API tests.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from orders_api.core.config import Settings
from orders_api.database import Database
from orders_api.main import create_app
from orders_api.services.preparation import MockPreparationService


def pytest_collection_modifyitems(config, items):
    """Tag tests that touch the database as integration tests."""
    for item in items:
        fixtures = getattr(item, "fixturenames", ())
        if "database" in fixtures:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        env_mode="development",
        database_url="sqlite+aiosqlite://",
        create_tables_on_startup=True,
        preparation_ms_host=None,
    )


@pytest.fixture
async def database() -> AsyncGenerator[Database, None]:
    """Fresh in-memory database per test."""
    db = Database("sqlite+aiosqlite://")
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
async def session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    async with database.session_maker() as s:
        yield s


@pytest.fixture
def preparation_service() -> MockPreparationService:
    return MockPreparationService()


@pytest.fixture
def app(settings, database, preparation_service):
    return create_app(
        settings=settings,
        database=database,
        preparation_service=preparation_service,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
