"""Shared fixtures: an in-memory SQLite database and an ASGI client wired to it."""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.infrastructure.database import Base, get_db_session
from app.infrastructure.database.session import enable_sqlite_foreign_keys
from app.infrastructure.dependencies import get_file_storage, get_session_codec
from app.infrastructure.storage.local_file_storage import LocalFileStorage
from app.main import app


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as db_session:
        yield db_session


@pytest_asyncio.fixture
async def storage(tmp_path) -> LocalFileStorage:
    return LocalFileStorage(upload_dir=str(tmp_path / "uploads"))


@pytest_asyncio.fixture
async def api_client(session_factory, storage) -> AsyncGenerator[AsyncClient, None]:
    """Unauthenticated client; every request gets its own committed session."""

    async def _override_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _override_session
    app.dependency_overrides[get_file_storage] = lambda: storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


async def _signup_and_authorize(
    client: AsyncClient, email: str, name: str = "Dev User"
) -> dict[str, str]:
    """Register a user through the API and return Bearer headers for it."""
    response = await client.post(
        "/api/v1/auth/signup",
        json={"name": name, "email": email, "password": "s3cret-pass"},
    )
    assert response.status_code == 201, response.text
    user_id = response.json()["data"]["id"]
    token = get_session_codec().issue(user_id)
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def alice(api_client) -> dict[str, str]:
    return await _signup_and_authorize(api_client, "alice@example.com", "Alice")


@pytest_asyncio.fixture
async def bob(api_client) -> dict[str, str]:
    return await _signup_and_authorize(api_client, "bob@example.com", "Bob")
