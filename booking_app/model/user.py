from typing import Optional

from beanie import Document


class User(Document):
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None

    class Settings:
        name = "users"
