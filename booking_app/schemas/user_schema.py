from __future__ import annotations

from typing import Optional

from beanie import PydanticObjectId
from pydantic import Field

from . import ORMModel


class UserBase(ORMModel):
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone: Optional[str] = None


class UserCreate(UserBase):
    pass


class UserOut(UserBase):
    id: PydanticObjectId = Field(..., alias="_id")
