"""One-shot sample data for local development."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from .models import Movie
from .repository import MovieRepository

logger = logging.getLogger(__name__)

SAMPLE_NAMES = ("A", "B")


async def seed_sample_movies(session: AsyncSession) -> list[Movie]:
    """Replace the catalog with the sample movies and return what is stored."""
    repo = MovieRepository(session)
    removed = await repo.delete_all()
    if removed:
        logger.info("Removed %d existing movies", removed)

    for name in SAMPLE_NAMES:
        await repo.save(Movie(name=name))
    await session.commit()

    movies = await repo.find_all()
    for movie in movies:
        logger.info("Seeded %r", movie)
    return movies
