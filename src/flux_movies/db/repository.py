"""Movie store: persistence operations over one AsyncSession."""

from uuid import uuid4

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from flux_movies.errors import StoreError

from .models import Movie


class MovieRepository:
    """
    Create, read and delete-all operations for movies.

    The repository never commits; callers own the transaction.
    Driver errors surface as StoreError.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, movie: Movie) -> str:
        """Persist a movie, assigning a fresh UUID when it has no id. Returns the id."""
        if not movie.name or not movie.name.strip():
            raise ValueError("Movie name must not be empty")
        if not movie.id:
            movie.id = str(uuid4())
        try:
            self._session.add(movie)
            await self._session.flush()
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not save movie {movie.id}") from exc
        return movie.id

    async def delete_all(self) -> int:
        """Delete every movie. Returns the number of rows removed."""
        try:
            result = await self._session.execute(delete(Movie))
        except SQLAlchemyError as exc:
            raise StoreError("Could not delete movies") from exc
        return result.rowcount or 0

    async def find_by_id(self, movie_id: str) -> Movie | None:
        try:
            return await self._session.get(Movie, movie_id)
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not read movie {movie_id}") from exc

    async def find_all(self) -> list[Movie]:
        try:
            result = await self._session.execute(select(Movie))
        except SQLAlchemyError as exc:
            raise StoreError("Could not list movies") from exc
        return list(result.scalars().all())
