from typing import Any, Dict

from fastapi import APIRouter, Body

from booking_app.crud.movie_crud import movie_crud
from booking_app.errors import NotFoundError
from booking_app.routers import json_body
from booking_app.schemas.movie_schema import MovieCreate, MovieOut

router = APIRouter(prefix="/movies", tags=["movies"])


@router.post("", response_model=MovieOut, openapi_extra=json_body(MovieCreate))
async def create_movie(attributes: Dict[str, Any] = Body(...)):
    return await movie_crud.create(attributes)


@router.get("/{movie_id}", response_model=MovieOut)
async def get_movie(movie_id: str):
    movie = await movie_crud.get(movie_id)
    if movie is None:
        raise NotFoundError("Movie not found")
    return movie
