"""Test configuration and fixtures.

Each test gets its own SQLite database file (aiosqlite) with the schema created
from the models:
1. Request handlers get fresh sessions from the test session factory
2. The activity logger writes through the same factory
3. Tests inspect results through the `session` fixture
"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from src.database.base import Base
from src.database.dependencies import get_db_session
from src.features.admin.jwt_utils import create_access_token
from src.features.intake.models import Submission
from src.main import app, limiter
from src.shared.activity.activity import ActivityLogger
from src.shared.activity.dependencies import get_activity_logger

VALID_FORM = {
    "name": "Anne-Marie O'Brien",
    "email": "anne@example.com",
    "phone": "123-456-7890",
    "password": "Abcdefg1!",
    "confirmPassword": "Abcdefg1!",
    "age": "30",
    "country": "us",
    "message": "Hello there",
}


@pytest.fixture
def valid_form() -> dict[str, str]:
    """A copy of a fully valid form submission."""
    return dict(VALID_FORM)


# Database Setup - Function Scope (fresh file per test)


@pytest_asyncio.fixture
async def db_engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a database engine and schema for one test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncGenerator[AsyncSession]:
    """Session for arranging and inspecting test data."""
    async with session_factory() as async_session:
        yield async_session


# Mock Database Initialization


@pytest.fixture(autouse=True)
def mock_db_initialization(monkeypatch):
    """Mock init_db and close_db so lifespan doesn't interfere with tests."""
    from src.database import client as db_module

    async def mock_init_db():
        pass

    async def mock_close_db():
        pass

    monkeypatch.setattr(db_module, "init_db", mock_init_db)
    monkeypatch.setattr(db_module, "close_db", mock_close_db)


@pytest.fixture(autouse=True)
def disable_rate_limit():
    """Rate limits are shared process-wide; keep them out of unrelated tests."""
    limiter.enabled = False
    yield
    limiter.enabled = True


# FastAPI Client & Dependency Overrides


@pytest_asyncio.fixture(autouse=True)
async def override_dependencies(session_factory: async_sessionmaker[AsyncSession]):
    """Point the session and activity logger dependencies at the test database."""

    async def _get_test_session():
        async with session_factory() as request_session:
            try:
                yield request_session
                await request_session.commit()
            except Exception:
                await request_session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _get_test_session
    app.dependency_overrides[get_activity_logger] = lambda: ActivityLogger(session_factory)
    yield
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create an async HTTP test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"User-Agent": "pytest-client"},
    ) as ac:
        yield ac


@pytest.fixture
def ajax_headers() -> dict[str, str]:
    return {"X-Requested-With": "XMLHttpRequest"}


@pytest.fixture
def admin_headers() -> dict[str, str]:
    token = create_access_token({"sub": "test-admin", "role": "admin"})
    return {"Authorization": f"Bearer {token}"}


# Test Submission Factory


@pytest_asyncio.fixture
async def make_submission(session: AsyncSession):
    """Factory fixture to store submissions with custom fields.

    Usage:
        submission = await make_submission()                       # defaults
        other = await make_submission(email="taken@example.com")   # custom email
    """
    counter = 0

    async def _factory(
        email=None,
        name="Test User",
        password="Abcdefg1!",
        age=30,
        country="us",
        **kwargs,
    ) -> Submission:
        nonlocal counter
        counter += 1

        if email is None:
            email = f"submitter{counter}@example.com"

        submission = Submission(
            name=name,
            email=email,
            password_hash=Submission.hash_password(password),
            age=age,
            country=country,
            **kwargs,
        )

        session.add(submission)
        await session.commit()
        await session.refresh(submission)
        return submission

    yield _factory
