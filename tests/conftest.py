"""
Test fixtures for Flux Movies API tests.
"""

import os
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test database before importing app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SEED_SAMPLE_DATA"] = "false"

from flux_movies.main import app
from flux_movies.db.models import Base, Movie
from flux_movies.db.session import get_session_factory
from flux_movies.service import MovieService


# One shared in-memory SQLite connection for the whole test run
test_engine = create_async_engine(
    "sqlite+aiosqlite:///:memory:",
    echo=False,
    poolclass=StaticPool,
)

TestSessionLocal = async_sessionmaker(
    test_engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def override_get_session_factory():
    """Override the session factory dependency for tests."""
    return TestSessionLocal


# Override the dependency
app.dependency_overrides[get_session_factory] = override_get_session_factory


@pytest.fixture(autouse=True)
async def setup_database():
    """Create tables before each test, drop after."""
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def client():
    """Async HTTP client for testing FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def db_session():
    """Direct database session for test setup/assertions."""
    async with TestSessionLocal() as session:
        yield session


@pytest.fixture
async def seed_movies(db_session):
    """Insert movies by (id, name) and commit."""

    async def _seed(*movies: tuple[str, str]) -> None:
        for movie_id, name in movies:
            db_session.add(Movie(id=movie_id, name=name))
        await db_session.commit()

    return _seed


@pytest.fixture
def fast_service(session_factory):
    """MovieService with a short interval so stream tests finish quickly."""
    return MovieService(session_factory, interval=0.2)


@pytest.fixture
def session_factory():
    return TestSessionLocal
