import logging
from typing import Any

from booking_app.crud.mongo_crud import MongoCRUD
from booking_app.crud.movie_crud import movie_crud
from booking_app.crud.user_crud import user_crud
from booking_app.errors import ReferenceNotFoundError, ValidationError
from booking_app.model.booking import Booking
from booking_app.schemas.booking_schema import BookingCreate

logger = logging.getLogger(__name__)


class BookingCRUD(MongoCRUD[Booking, BookingCreate]):

    async def create(self, attributes: Any) -> Booking:
        """
        Insert a booking once both the user and the movie it references exist.

        The lookups and the insert are separate store calls: nothing guards
        against a referenced document disappearing in between.
        """
        obj_in = self.validate(attributes)
        if isinstance(obj_in, ValidationError):
            raise obj_in

        user = await user_crud.get(obj_in.user_id)
        movie = await movie_crud.get(obj_in.movie_id)
        if user is None or movie is None:
            logger.info(
                "Booking rejected: user %s found=%s, movie %s found=%s",
                obj_in.user_id, user is not None, obj_in.movie_id, movie is not None,
            )
            raise ReferenceNotFoundError()

        return await self.insert(obj_in)


booking_crud = BookingCRUD(Booking, BookingCreate)
