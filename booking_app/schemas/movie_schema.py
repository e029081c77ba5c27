from __future__ import annotations

from typing import Optional

from beanie import PydanticObjectId
from pydantic import Field

from . import ORMModel


class MovieBase(ORMModel):
    title: str = Field(..., min_length=1)
    genre: str = Field(..., min_length=1)
    description: Optional[str] = None
    duration: Optional[int] = Field(None, description="Duration in minutes")
    language: Optional[str] = None
    release_year: Optional[int] = Field(None, alias="releaseYear")
    rating: Optional[float] = Field(None, description="e.g., 4.5 out of 5.0")


class MovieCreate(MovieBase):
    pass


class MovieOut(MovieBase):
    id: PydanticObjectId = Field(..., alias="_id")
