from typing import Optional

from beanie import Document
from pydantic import Field


class Movie(Document):
    title: str
    genre: str
    description: Optional[str] = None
    duration: Optional[int] = Field(None, description="Duration in minutes")
    language: Optional[str] = None
    release_year: Optional[int] = Field(None, alias="releaseYear")
    rating: Optional[float] = None

    class Settings:
        name = "movies"
