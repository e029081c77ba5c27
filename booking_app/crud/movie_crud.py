from booking_app.crud.mongo_crud import MongoCRUD
from booking_app.model.movie import Movie
from booking_app.schemas.movie_schema import MovieCreate

movie_crud = MongoCRUD[Movie, MovieCreate](Movie, MovieCreate)
