"""
Test fixtures and configuration.

Database-backed tests run against a throwaway SQLite file per test.
"""

from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession

from augure.config.settings import Settings, override_settings, reset_settings
from augure.di.container import DIContainer, reset_container
from augure.infrastructure.persistence.database import Database
from tests.helpers import FakeInsightGenerator, FakeMarketDataClient


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings for an isolated test run."""
    return Settings(
        ENV="test",
        LOG_LEVEL="WARNING",
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'augure_test.db'}",
        JWT_SECRET_KEY="test-secret",
        GEMINI_API_KEY=None,
        RETRY_MAX_RETRIES=0,
        RETRY_INITIAL_DELAY=0.0,
        PASSWORD_HASH_ITERATIONS=1000,
        METRICS_ENABLED=False,
    )


@pytest.fixture(autouse=True)
def _test_settings(settings: Settings):
    """Install test settings process-wide."""
    override_settings(settings)
    yield
    reset_settings()
    reset_container()


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Connected database with a fresh schema."""
    db = Database(database_url=settings.DATABASE_URL)
    await db.connect()
    await db.create_schema()

    yield db

    await db.disconnect()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with database.session() as session:
        yield session


@pytest.fixture
def market_data() -> FakeMarketDataClient:
    return FakeMarketDataClient()


@pytest.fixture
def insight_generator() -> FakeInsightGenerator:
    return FakeInsightGenerator()


@pytest_asyncio.fixture
async def client(
    settings: Settings,
    market_data: FakeMarketDataClient,
    insight_generator: FakeInsightGenerator,
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Provide HTTP client for API testing.

    External integrations are replaced through dependency overrides.
    """
    from augure.di.dependencies import get_insight_generator, get_market_data_client
    from augure.main import create_app

    container = DIContainer(settings)
    reset_container(container)
    await container.initialize()
    await container.database.create_schema()

    app = create_app(settings)
    app.dependency_overrides[get_market_data_client] = lambda: market_data
    app.dependency_overrides[get_insight_generator] = lambda: insight_generator

    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await container.shutdown()
