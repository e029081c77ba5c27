from typing import List

from fastapi import APIRouter, Depends

from booking_app.crud.analytics_crud import AnalyticsService
from booking_app.database import MongoStore, get_store
from booking_app.schemas.analytics_schema import (
    ActiveBooking,
    GenreSeatTotal,
    MovieBookingTotal,
    TopUser,
    UserBookingHistory,
)

router = APIRouter(prefix="/analytics", tags=["analytics"])


def get_analytics(store: MongoStore = Depends(get_store)) -> AnalyticsService:
    return AnalyticsService(store)


@router.get(
    "/movie-bookings",
    response_model=List[MovieBookingTotal],
    summary="Bookings and seats per movie",
)
async def movie_bookings(analytics: AnalyticsService = Depends(get_analytics)):
    return await analytics.movie_bookings()


@router.get(
    "/user-bookings",
    response_model=List[UserBookingHistory],
    summary="Booking history grouped by user",
)
async def user_bookings(analytics: AnalyticsService = Depends(get_analytics)):
    return await analytics.user_bookings()


@router.get(
    "/top-users",
    response_model=List[TopUser],
    summary="Users with more than two bookings",
)
async def top_users(analytics: AnalyticsService = Depends(get_analytics)):
    return await analytics.top_users()


@router.get(
    "/genre-wise-bookings",
    response_model=List[GenreSeatTotal],
    summary="Seats booked per movie genre",
)
async def genre_wise_bookings(analytics: AnalyticsService = Depends(get_analytics)):
    return await analytics.genre_bookings()


@router.get(
    "/active-bookings",
    response_model=List[ActiveBooking],
    summary="Bookings whose status is exactly 'Booked'",
)
async def active_bookings(analytics: AnalyticsService = Depends(get_analytics)):
    return await analytics.active_bookings()
