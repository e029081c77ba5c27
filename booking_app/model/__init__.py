from booking_app.model.booking import Booking
from booking_app.model.movie import Movie
from booking_app.model.user import User

DOCUMENT_MODELS = [Movie, User, Booking]
