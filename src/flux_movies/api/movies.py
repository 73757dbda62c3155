"""Movie catalog and event stream endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sse_starlette.sse import EventSourceResponse

from flux_movies import config
from flux_movies.db import get_session_factory
from flux_movies.schemas import MovieRead
from flux_movies.service import MovieService
from flux_movies.stream import MovieEventStream

router = APIRouter(prefix="/movies", tags=["movies"])


def get_movie_service(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> MovieService:
    return MovieService(session_factory)


def _not_found() -> HTTPException:
    return HTTPException(status_code=404, detail="Movie not found")


async def _event_frames(stream: MovieEventStream):
    """Render each event as an SSE frame; closes the stream when the response ends."""
    async with stream:
        async for event in stream:
            yield {
                "event": "movie",
                "id": str(stream.emitted),
                "data": event.model_dump_json(),
            }


# --- Routes ---


@router.get("", response_model=list[MovieRead])
async def list_movies(
    service: MovieService = Depends(get_movie_service),
) -> list[MovieRead]:
    """List all movies."""
    return await service.find_all()


@router.get("/{movie_id}", response_model=MovieRead)
async def get_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
):
    """
    Get one movie.

    An unknown id answers 200 with an empty body unless STRICT_NOT_FOUND
    is enabled, in which case it is a 404.
    """
    movie = await service.find_by_id(movie_id)
    if movie is None:
        if config.STRICT_NOT_FOUND:
            raise _not_found()
        return Response(status_code=200)
    return movie


@router.get("/{movie_id}/events")
async def stream_movie_events(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> EventSourceResponse:
    """
    Stream events for a movie via Server-Sent Events.

    One event per interval until the client disconnects. An unknown id
    opens and immediately ends the stream (404 under STRICT_NOT_FOUND).
    """
    stream = await service.get_events(movie_id)
    if stream.movie is None and config.STRICT_NOT_FOUND:
        raise _not_found()
    return EventSourceResponse(_event_frames(stream))
