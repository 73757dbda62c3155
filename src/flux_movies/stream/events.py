"""Single-use, interval-paced event stream for one movie."""

import asyncio
import logging
from datetime import datetime, timezone

from flux_movies.schemas import MovieEvent, MovieRead

from .ticker import IntervalTimer, TimerClosed

logger = logging.getLogger(__name__)


class MovieEventStream:
    """
    Yields a MovieEvent for `movie` on every tick of an IntervalTimer.

    The movie is bound once when the stream is built. A stream built
    without a movie is empty. The stream never ends on its own: it stops
    when closed or when the task reading it is cancelled, and either way
    the timer handle is released before control leaves the stream.
    """

    def __init__(self, movie: MovieRead | None, interval: float):
        self.movie = movie
        self.emitted = 0
        self._timer = IntervalTimer(interval) if movie is not None else None
        self._closed = movie is None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def timer(self) -> IntervalTimer | None:
        return self._timer

    def __aiter__(self) -> "MovieEventStream":
        return self

    async def __anext__(self) -> MovieEvent:
        if self._closed:
            raise StopAsyncIteration
        try:
            await self._timer.wait()
        except TimerClosed:
            raise StopAsyncIteration from None
        except asyncio.CancelledError:
            logger.debug("Event stream for movie %s cancelled", self.movie.id)
            self.close()
            raise

        self.emitted += 1
        return MovieEvent(movie=self.movie, when=datetime.now(timezone.utc))

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._timer.close()
        logger.debug(
            "Closed event stream for movie %s after %d events",
            self.movie.id,
            self.emitted,
        )

    async def aclose(self) -> None:
        self.close()

    async def __aenter__(self) -> "MovieEventStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.close()
