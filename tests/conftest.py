"""Shared fixtures: in-memory SQLite database, users, exercises and an API client."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

import liftlog.models  # noqa: F401 - register all models
from liftlog.api.deps import get_current_user
from liftlog.db.base import Base
from liftlog.db.session import get_db
from liftlog.main import app
from liftlog.models.exercise import Exercise
from liftlog.models.user import User


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db(engine):
    maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
    async with maker() as session:
        yield session


# =============================================================================
# Users and exercises
# =============================================================================


@pytest_asyncio.fixture
async def make_user(db):
    async def _make(external_id: str, name: str = "") -> User:
        user = User(external_id=external_id, name=name)
        db.add(user)
        await db.flush()
        return user

    return _make


@pytest_asyncio.fixture
async def alice(make_user):
    return await make_user("user_alice", "Alice A")


@pytest_asyncio.fixture
async def bob(make_user):
    return await make_user("user_bob", "Bob B")


@pytest_asyncio.fixture
async def bench(db):
    exercise = Exercise(name="Bench Press", muscle_groups=["chest", "triceps"], equipment="barbell")
    db.add(exercise)
    await db.flush()
    return exercise


@pytest_asyncio.fixture
async def squat(db):
    exercise = Exercise(name="Back Squat", muscle_groups=["quads", "glutes"], equipment="barbell")
    db.add(exercise)
    await db.flush()
    return exercise


@pytest_asyncio.fixture
async def alice_custom(db, alice):
    exercise = Exercise(
        name="Alice's Landmine Press",
        muscle_groups=["shoulders_front"],
        is_custom=True,
        user_id=alice.id,
    )
    db.add(exercise)
    await db.flush()
    return exercise


# =============================================================================
# API client
# =============================================================================


@pytest_asyncio.fixture
async def client(db):
    """HTTP client sharing the test session; use `login(user)` to pick the caller."""

    async def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def login():
    def _login(user: User) -> None:
        app.dependency_overrides[get_current_user] = lambda: user

    return _login
