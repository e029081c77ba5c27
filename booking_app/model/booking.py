from datetime import datetime
from typing import Optional

from beanie import Document, PydanticObjectId
from pydantic import Field


class Booking(Document):
    # Plain ObjectId references: integrity is only checked when the booking is created
    user_id: PydanticObjectId = Field(..., alias="userId")
    movie_id: PydanticObjectId = Field(..., alias="movieId")
    seats: Optional[int] = None
    booking_date: Optional[datetime] = Field(None, alias="bookingDate")
    status: Optional[str] = None

    class Settings:
        name = "bookings"
