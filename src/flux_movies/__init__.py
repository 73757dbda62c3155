"""Flux Movies: a movie catalog with per-movie Server-Sent Event streams."""

from pathlib import Path

from dotenv import load_dotenv

__version__ = "0.1.0"

# Load .env from project root (src/flux_movies/__init__.py -> .env) before any settings are read
load_dotenv(Path(__file__).parent.parent.parent / ".env")
