"""Flux Movies server."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flux_movies import __version__, config
from flux_movies.api import router
from flux_movies.db import Base, async_session, engine
from flux_movies.db.seed import seed_sample_movies
from flux_movies.errors import StoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Seeding finishes before the server accepts connections
    if config.SEED_SAMPLE_DATA:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with async_session() as session:
            await seed_sample_movies(session)
    yield
    await engine.dispose()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.exception("Store failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=500, content={"detail": "Movie store unavailable"})


def create_app() -> FastAPI:
    config.configure_logging()

    app = FastAPI(title="Flux Movies", version=__version__, lifespan=lifespan)

    # Allow frontend to connect
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StoreError, store_error_handler)
    app.include_router(router)
    return app


app = create_app()


def run() -> None:
    """Console entry point."""
    import uvicorn

    uvicorn.run("flux_movies.main:app", host=config.HOST, port=config.PORT)
