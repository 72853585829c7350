"""Root conftest — shared test configuration and app fixtures.

Invariants:
    - Tests never use real API keys or the on-disk database
    - Every test gets a fresh in-memory SQLite database
    - get_db, get_transformer and get_settings are overridden on the app
    - db_manager patched so readiness probes see the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, matches the default store
    - The fake generator fails unless a reply is queued, so the deterministic
      fallback is the default path under test
"""

import os

# Ensure tests don't accidentally use real API keys or the local diary.db
os.environ.setdefault("ANTHROPIC_API_KEY", "sk-ant-test-fake-key")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

from diary.api.dependencies import get_transformer  # noqa: E402
from diary.config import Settings, get_settings  # noqa: E402
from diary.db.base import Base  # noqa: E402
from diary.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from diary.models.entry import Entry  # noqa: E402
from diary.services.greentext_transformer import GreentextTransformer  # noqa: E402
import diary.infrastructure.database as db_module  # noqa: E402
from diary.main import app  # noqa: E402

from tests.services.fake_generator import FakeGenerator  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
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
def fake_generator():
    return FakeGenerator()


@pytest.fixture
def app_settings():
    """Settings seen by route handlers. Tests may mutate fields."""
    return Settings(anthropic_api_key="", admin_token=None)


@pytest.fixture
async def client(test_engine, test_session_factory, fake_generator, app_settings):
    """FastAPI test client with DB, transformer and settings overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_transformer] = (
        lambda: GreentextTransformer(fake_generator)
    )
    app.dependency_overrides[get_settings] = lambda: app_settings

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
async def seed_entries(test_db):
    """Insert three entries directly, oldest first."""
    entries = []
    for i in range(3):
        entry = Entry(
            content=f"day {i}", greentext=f">day {i}",
            name="Anonymous", sub="",
        )
        test_db.add(entry)
        await test_db.commit()
        await test_db.refresh(entry)
        entries.append(entry)
    return entries
