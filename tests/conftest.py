"""Shared pytest fixtures configured to use SQLite in-memory for tests."""

import logging
import os

# Must be set before the app (and its module-level settings) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_TO_FILE", "false")
os.environ["NOTEBOX_SKIP_LIFESPAN_DB"] = "1"

from datetime import timedelta
from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from notebox.config import Settings, get_settings
from notebox.core.models import BaseModel, Note, User
from notebox.database import build_engine, get_db_session
from notebox.main import app
from notebox.security.jwt import TokenCodec
from notebox.security.password import PasswordHasher

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
def test_settings():
    """Settings for tests using SQLite in-memory DB."""
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        secret_key="test-secret-key",
        debug=True,
        log_to_file=False,
        legacy_wire_format=True,
    )


@pytest.fixture
def codec(test_settings):
    return TokenCodec.from_settings(test_settings)


@pytest.fixture
async def test_engine(test_settings):
    """Fresh SQLite in-memory engine with the schema created."""
    # StaticPool keeps the same memory DB across connections
    engine = build_engine(test_settings.database_url, poolclass=StaticPool)

    async with engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.create_all)

    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory):
    """Database session for a single test."""
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.rollback()


@pytest.fixture
def test_app(session_factory, test_settings):
    """The app with DB and settings dependencies pointed at the test doubles."""

    async def _override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app):
    """Async client talking to the app in-process."""
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def test_user_data():
    """Sample user data for testing."""
    return {
        "fullName": "Test User",
        "email": f"user_{uuid4().hex[:8]}@example.com",
        "password": "TestPassword123!",
    }


async def _create_user(session, data) -> User:
    user = User(
        full_name=data["fullName"],
        email=data["email"],
        password_hash=PasswordHasher(rounds=4).hash(data["password"]),
    )
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@pytest.fixture
async def test_user(test_session, test_user_data):
    """Create a test user in the database."""
    return await _create_user(test_session, test_user_data)


@pytest.fixture
async def other_user(test_session):
    """A second user, for ownership checks."""
    return await _create_user(
        test_session,
        {"fullName": "Other User", "email": f"other_{uuid4().hex[:8]}@example.com", "password": "x"},
    )


def bearer_for(codec: TokenCodec, user: User) -> dict[str, str]:
    payload = {
        "user": {
            "_id": str(user.id),
            "fullName": user.full_name,
            "email": user.email,
            "createdOn": user.created_on.isoformat(),
        }
    }
    return {"Authorization": f"Bearer {codec.issue(payload, timedelta(minutes=30))}"}


@pytest.fixture
def auth_headers(codec, test_user):
    """Authentication headers with a valid JWT for test_user."""
    return bearer_for(codec, test_user)


@pytest.fixture
def other_auth_headers(codec, other_user):
    return bearer_for(codec, other_user)


@pytest.fixture
async def test_note(test_session, test_user):
    """Create a test note in the database."""
    note = Note(
        title="Test Note",
        content="This is a test note content",
        tags=["test", "Test", "Note"],
        is_pinned=False,
        user_id=test_user.id,
    )
    test_session.add(note)
    await test_session.commit()
    await test_session.refresh(note)
    return note
