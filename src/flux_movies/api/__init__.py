"""API routes."""

from fastapi import APIRouter

from .health import router as health_router
from .movies import router as movies_router

router = APIRouter()
router.include_router(health_router)
router.include_router(movies_router)
