from __future__ import annotations

from datetime import datetime
from typing import Optional

from beanie import PydanticObjectId
from pydantic import Field

from . import ORMModel


class BookingBase(ORMModel):
    user_id: PydanticObjectId = Field(..., alias="userId")
    movie_id: PydanticObjectId = Field(..., alias="movieId")
    # seats/bookingDate/status are stored as given, no range or presence rules
    seats: Optional[int] = None
    booking_date: Optional[datetime] = Field(None, alias="bookingDate")
    status: Optional[str] = None


class BookingCreate(BookingBase):
    pass


class BookingOut(BookingBase):
    id: PydanticObjectId = Field(..., alias="_id")
