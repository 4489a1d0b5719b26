"""
Pytest configuration and fixtures for catalog API tests.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker

from app.config import Settings, get_settings
from app.db.base import Base
from app.db.session import enable_sqlite_foreign_keys, get_db
from app.main import app
from app.models import User


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """Get test settings."""
    return Settings(
        JWT_SECRET="test-secret",
        JWT_EXPIRE_MINUTES=5,
        TAG_SUGGESTION_LIMIT=10,
    )


@pytest_asyncio.fixture(scope="function")
async def db_engine(tmp_path):
    """Create a test database engine backed by a per-test SQLite file."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        echo=False,
    )
    enable_sqlite_foreign_keys(engine)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture(scope="function")
async def client(db_session, test_settings) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def signup(client: AsyncClient) -> Callable[[str], Awaitable[dict[str, str]]]:
    """Sign up a user and return Authorization headers carrying their token."""

    async def _signup(username: str, password: str = "hunter2") -> dict[str, str]:
        response = await client.post(
            "/api/signup",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _signup


@pytest_asyncio.fixture
async def make_user(db_session: AsyncSession) -> Callable[[str], Awaitable[User]]:
    """Insert a user row directly, for service-level tests."""

    async def _make_user(username: str) -> User:
        user = User(username=username, password_hash="not-a-real-hash")
        db_session.add(user)
        await db_session.flush()
        return user

    return _make_user


@pytest.fixture
def sample_work_data() -> dict:
    """Sample work registration body."""
    return {
        "pixivId": "12345678",
        "title": "Sunset over the harbor",
        "type": "illustration",
        "tags": ["landscape", "sunset"],
    }
