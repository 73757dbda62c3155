"""Movie lookups and per-movie event streams."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from flux_movies import config
from flux_movies.db import MovieRepository
from flux_movies.schemas import MovieRead
from flux_movies.stream import MovieEventStream

logger = logging.getLogger(__name__)


class MovieService:
    """
    Read-only facade over the movie store.

    Every lookup runs in its own short-lived session and returns frozen
    MovieRead snapshots, so nothing returned here holds a DB connection.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        interval: float | None = None,
    ):
        self._session_factory = session_factory
        self.interval = config.EVENT_INTERVAL_SECONDS if interval is None else interval
        if self.interval <= 0:
            raise ValueError(f"event interval must be positive, got {self.interval!r}")

    async def find_by_id(self, movie_id: str) -> MovieRead | None:
        """Return the movie, or None when no movie has this id."""
        async with self._session_factory() as session:
            movie = await MovieRepository(session).find_by_id(movie_id)
            return MovieRead.model_validate(movie) if movie is not None else None

    async def find_all(self) -> list[MovieRead]:
        async with self._session_factory() as session:
            movies = await MovieRepository(session).find_all()
            return [MovieRead.model_validate(movie) for movie in movies]

    async def get_events(self, movie_id: str) -> MovieEventStream:
        """
        Resolve the movie once and build its event stream.

        An unknown id yields an empty stream rather than an error.
        """
        movie = await self.find_by_id(movie_id)
        if movie is None:
            logger.debug("Movie %s not found; event stream is empty", movie_id)
        else:
            logger.debug("Opening event stream for movie %s every %ss", movie_id, self.interval)
        return MovieEventStream(movie, self.interval)
