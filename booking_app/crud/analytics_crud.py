"""
Booking analytics.

Each report is a pipeline builder (a pure function returning the aggregation
stages run against the ``bookings`` collection) plus an ``AnalyticsService``
method that executes it on a ``MongoStore``. Joins use ``$lookup`` followed by
``$unwind``, so bookings whose user or movie cannot be resolved drop out.
"""
import logging
from typing import Any, Dict, List

from pymongo.errors import PyMongoError

from booking_app.database import MongoStore
from booking_app.errors import StoreError
from booking_app.model.booking import Booking
from booking_app.model.movie import Movie
from booking_app.model.user import User

logger = logging.getLogger(__name__)

Pipeline = List[Dict[str, Any]]

ACTIVE_STATUS = "Booked"
TOP_USER_BOOKING_THRESHOLD = 2


def _join(collection: str, local_field: str, as_field: str) -> Pipeline:
    return [
        {
            "$lookup": {
                "from": collection,
                "localField": local_field,
                "foreignField": "_id",
                "as": as_field,
            }
        },
        {"$unwind": f"${as_field}"},
    ]


def _join_user(local_field: str = "userId") -> Pipeline:
    return _join(User.Settings.name, local_field, "user")


def _join_movie(local_field: str = "movieId") -> Pipeline:
    return _join(Movie.Settings.name, local_field, "movie")


# ---------- Pipeline builders ----------

def movie_bookings_pipeline() -> Pipeline:
    return [
        {
            "$group": {
                "_id": "$movieId",
                "totalBookings": {"$sum": 1},
                "totalSeats": {"$sum": "$seats"},
            }
        },
        *_join_movie(local_field="_id"),
        {
            "$project": {
                "movieTitle": "$movie.title",
                "totalBookings": 1,
                "totalSeats": 1,
            }
        },
    ]


def user_bookings_pipeline() -> Pipeline:
    return [
        *_join_user(),
        *_join_movie(),
        {
            "$group": {
                "_id": "$userId",
                "userName": {"$first": "$user.name"},
                "bookings": {
                    "$push": {
                        "movieTitle": "$movie.title",
                        "bookingDate": "$bookingDate",
                        "seats": "$seats",
                        "status": "$status",
                    }
                },
            }
        },
    ]


def top_users_pipeline(threshold: int = TOP_USER_BOOKING_THRESHOLD) -> Pipeline:
    return [
        {"$group": {"_id": "$userId", "bookingCount": {"$sum": 1}}},
        {"$match": {"bookingCount": {"$gt": threshold}}},
        *_join_user(local_field="_id"),
        {"$project": {"userName": "$user.name", "bookingCount": 1}},
    ]


def genre_bookings_pipeline() -> Pipeline:
    return [
        *_join_movie(),
        {"$group": {"_id": "$movie.genre", "totalSeats": {"$sum": "$seats"}}},
    ]


def active_bookings_pipeline(status: str = ACTIVE_STATUS) -> Pipeline:
    return [
        {"$match": {"status": status}},
        *_join_user(),
        *_join_movie(),
        {
            "$project": {
                "userName": "$user.name",
                "movieTitle": "$movie.title",
                "seats": 1,
                "bookingDate": 1,
            }
        },
    ]


# ---------- Execution ----------

class AnalyticsService:
    def __init__(self, store: MongoStore):
        self.store = store

    async def run(self, pipeline: Pipeline) -> List[Dict[str, Any]]:
        collection = self.store.collection(Booking.Settings.name)
        try:
            return await collection.aggregate(pipeline).to_list(length=None)
        except PyMongoError as exc:
            logger.error("Aggregation on %s failed: %s", Booking.Settings.name, exc)
            raise StoreError(str(exc)) from exc

    async def movie_bookings(self) -> List[Dict[str, Any]]:
        return await self.run(movie_bookings_pipeline())

    async def user_bookings(self) -> List[Dict[str, Any]]:
        return await self.run(user_bookings_pipeline())

    async def top_users(self) -> List[Dict[str, Any]]:
        return await self.run(top_users_pipeline())

    async def genre_bookings(self) -> List[Dict[str, Any]]:
        return await self.run(genre_bookings_pipeline())

    async def active_bookings(self) -> List[Dict[str, Any]]:
        return await self.run(active_bookings_pipeline())
