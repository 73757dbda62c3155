"""
Tests for the movie store and the lookup service.
"""

import pytest

from flux_movies.db.models import Movie
from flux_movies.db.repository import MovieRepository
from flux_movies.db.seed import SAMPLE_NAMES, seed_sample_movies
from flux_movies.service import MovieService


@pytest.mark.asyncio
async def test_save_assigns_id(db_session):
    """save() fills in a UUID when the movie has no id."""
    repo = MovieRepository(db_session)

    movie_id = await repo.save(Movie(name="Alpha"))
    await db_session.commit()

    assert len(movie_id) == 36
    stored = await repo.find_by_id(movie_id)
    assert stored is not None
    assert stored.name == "Alpha"


@pytest.mark.asyncio
async def test_save_keeps_given_id(db_session):
    repo = MovieRepository(db_session)

    assert await repo.save(Movie(id="A1", name="Alpha")) == "A1"


@pytest.mark.asyncio
async def test_save_rejects_empty_name(db_session):
    repo = MovieRepository(db_session)

    with pytest.raises(ValueError):
        await repo.save(Movie(name="  "))


@pytest.mark.asyncio
async def test_find_all_returns_every_movie(db_session):
    repo = MovieRepository(db_session)
    names = [f"Movie {i}" for i in range(5)]
    ids = [await repo.save(Movie(name=name)) for name in names]
    await db_session.commit()

    movies = await repo.find_all()

    assert {(m.id, m.name) for m in movies} == set(zip(ids, names))


@pytest.mark.asyncio
async def test_delete_all_reports_count(db_session):
    repo = MovieRepository(db_session)
    await repo.save(Movie(name="Alpha"))
    await repo.save(Movie(name="Beta"))
    await db_session.commit()

    assert await repo.delete_all() == 2
    await db_session.commit()
    assert await repo.find_all() == []


@pytest.mark.asyncio
async def test_service_find_by_id_absent_is_none(session_factory):
    service = MovieService(session_factory)

    assert await service.find_by_id("nope") is None


@pytest.mark.asyncio
async def test_service_returns_snapshots(seed_movies, session_factory):
    """The service hands out detached schemas, not ORM rows."""
    await seed_movies(("A1", "Alpha"))
    service = MovieService(session_factory)

    movie = await service.find_by_id("A1")

    assert not isinstance(movie, Movie)
    assert (movie.id, movie.name) == ("A1", "Alpha")
    assert [m.id for m in await service.find_all()] == ["A1"]


def test_service_rejects_non_positive_interval(session_factory):
    with pytest.raises(ValueError):
        MovieService(session_factory, interval=0)


@pytest.mark.asyncio
async def test_seed_replaces_catalog(db_session, seed_movies):
    """Seeding clears existing movies and stores the sample set."""
    await seed_movies(("OLD", "Old movie"))

    movies = await seed_sample_movies(db_session)

    assert sorted(m.name for m in movies) == sorted(SAMPLE_NAMES)
    assert "OLD" not in {m.id for m in movies}
    assert len({m.id for m in movies}) == len(SAMPLE_NAMES)
