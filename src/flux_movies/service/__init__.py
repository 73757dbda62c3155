"""Service layer."""

from .movies import MovieService

__all__ = ["MovieService"]
