from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from beanie import PydanticObjectId
from pydantic import Field

from . import ORMModel


class MovieBookingTotal(ORMModel):
    id: PydanticObjectId = Field(..., alias="_id")
    movie_title: Optional[str] = Field(None, alias="movieTitle")
    total_bookings: int = Field(..., alias="totalBookings")
    total_seats: int = Field(..., alias="totalSeats")


class UserBookingItem(ORMModel):
    movie_title: Optional[str] = Field(None, alias="movieTitle")
    booking_date: Optional[datetime] = Field(None, alias="bookingDate")
    seats: Optional[int] = None
    status: Optional[str] = None


class UserBookingHistory(ORMModel):
    id: PydanticObjectId = Field(..., alias="_id")
    user_name: Optional[str] = Field(None, alias="userName")
    bookings: List[UserBookingItem] = []


class TopUser(ORMModel):
    id: PydanticObjectId = Field(..., alias="_id")
    user_name: Optional[str] = Field(None, alias="userName")
    booking_count: int = Field(..., alias="bookingCount")


class GenreSeatTotal(ORMModel):
    genre: Optional[str] = Field(None, alias="_id")
    total_seats: int = Field(..., alias="totalSeats")


class ActiveBooking(ORMModel):
    id: PydanticObjectId = Field(..., alias="_id")
    user_name: Optional[str] = Field(None, alias="userName")
    movie_title: Optional[str] = Field(None, alias="movieTitle")
    seats: Optional[int] = None
    booking_date: Optional[datetime] = Field(None, alias="bookingDate")
