from typing import Any, Dict

from fastapi import APIRouter, Body

from booking_app.crud.booking_crud import booking_crud
from booking_app.routers import json_body
from booking_app.schemas.booking_schema import BookingCreate, BookingOut

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingOut, openapi_extra=json_body(BookingCreate))
async def create_booking(attributes: Dict[str, Any] = Body(...)):
    return await booking_crud.create(attributes)
