"""Async database engine and session management."""

import os
from pathlib import Path
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Database path from environment or default to data/flux_movies.db relative to the project root
_default_db_path = Path(__file__).parent.parent.parent.parent / "data" / "flux_movies.db"
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite+aiosqlite:///{_default_db_path}")

engine = create_async_engine(DATABASE_URL, echo=False)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory dependency; readers open one short-lived session per call."""
    return async_session
