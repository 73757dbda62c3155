"""Database module for Flux Movies."""

from .models import Base, Movie
from .repository import MovieRepository
from .session import engine, async_session, get_session_factory, DATABASE_URL

__all__ = [
    "Base",
    "Movie",
    "MovieRepository",
    "engine",
    "async_session",
    "get_session_factory",
    "DATABASE_URL",
]
