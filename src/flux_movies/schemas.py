"""Pydantic schemas shared by the service layer and the API."""

from datetime import datetime

from pydantic import BaseModel


class MovieRead(BaseModel):
    id: str
    name: str

    class Config:
        from_attributes = True
        frozen = True


class MovieEvent(BaseModel):
    """A movie paired with the moment the event was emitted."""

    movie: MovieRead
    when: datetime

    class Config:
        frozen = True
