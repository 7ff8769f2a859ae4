"""API test fixtures: in-memory store, app built from explicit Settings, HTTP clients.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test engine
    - db_manager patched so the readiness probe sees the test engine
    - `client` sends the correct x-api-key; `anon_client` sends none
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

import fitness_api.infrastructure.database as db_module
from fitness_api.config import Settings
from fitness_api.db.base import Base
from fitness_api.infrastructure.database import DatabaseSessionManager, get_db
from fitness_api.main import create_app
import fitness_api.models  # noqa: F401

API_KEY = "s3cret-test-key"


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
def settings():
    return Settings(
        _env_file=None,
        database_url="sqlite+aiosqlite:///:memory:",
        api_key=API_KEY,
    )


@pytest.fixture
async def app(settings, test_engine, test_session_factory):
    """App with DB dependency overridden and db_manager pointed at the test engine."""
    application = create_app(settings)

    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    application.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    yield application

    application.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"x-api-key": API_KEY},
    ) as c:
        yield c


@pytest.fixture
async def anon_client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def add_records(test_session_factory):
    """Insert ORM records directly, bypassing the API."""
    async def _add(*records):
        async with test_session_factory() as db:
            db.add_all(records)
            await db.commit()
        return records
    return _add


@pytest.fixture
def count_rows(test_session_factory):
    async def _count(model) -> int:
        async with test_session_factory() as db:
            return await db.scalar(select(func.count()).select_from(model))
    return _count


@pytest.fixture
def fetch(test_session_factory):
    """Read one record by id in a fresh session."""
    async def _fetch(model, entity_id):
        async with test_session_factory() as db:
            return await db.get(model, entity_id)
    return _fetch
