from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import teapots.models  # noqa: F401  registers models with Base.metadata
from teapots.db.session import Base, get_sessionmaker
from teapots.dependencies import get_seeder
from teapots.main import app
from teapots.services.teapot import TeapotSeeder
from tests.factories import default_teapots

# Pytest only picks up fixtures from conftest.py files. Fixtures defined in other
# modules (like tests/seeds.py) are invisible unless we register them here.
pytest_plugins = ["tests.seeds"]

# One in-memory SQLite database per test. StaticPool keeps the single
# connection alive so every session sees the same tables.
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def sessions() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Create a fresh database with all tables and yield its session factory."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db(sessions: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    async with sessions() as session:
        yield session


@pytest_asyncio.fixture
async def seeder(sessions: async_sessionmaker[AsyncSession]) -> TeapotSeeder:
    """Seeder bound to the test database, created inside the test's event loop."""
    return TeapotSeeder(sessions, default_teapots())


@pytest_asyncio.fixture
async def client(
    sessions: async_sessionmaker[AsyncSession], seeder: TeapotSeeder
) -> AsyncIterator[AsyncClient]:
    """HTTP client whose requests use the test database."""
    app.dependency_overrides[get_sessionmaker] = lambda: sessions
    app.dependency_overrides[get_seeder] = lambda: seeder

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
