from typing import Any, Dict

from fastapi import APIRouter, Body

from booking_app.crud.user_crud import user_crud
from booking_app.errors import NotFoundError
from booking_app.routers import json_body
from booking_app.schemas.user_schema import UserCreate, UserOut

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserOut, openapi_extra=json_body(UserCreate))
async def create_user(attributes: Dict[str, Any] = Body(...)):
    return await user_crud.create(attributes)


@router.get("/{user_id}", response_model=UserOut)
async def get_user(user_id: str):
    user = await user_crud.get(user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user
