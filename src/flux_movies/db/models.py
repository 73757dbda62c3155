"""SQLAlchemy models for the movie catalog."""

from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all models."""
    pass


class Movie(Base):
    """A catalog entry. The id is assigned once at creation and never changes."""

    __tablename__ = "movies"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"Movie(id={self.id!r}, name={self.name!r})"
