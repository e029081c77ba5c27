from booking_app.crud.mongo_crud import MongoCRUD
from booking_app.model.user import User
from booking_app.schemas.user_schema import UserCreate

user_crud = MongoCRUD[User, UserCreate](User, UserCreate)
