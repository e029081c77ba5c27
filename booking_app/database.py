import logging
from typing import Optional

from beanie import init_beanie
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from booking_app.model import DOCUMENT_MODELS

logger = logging.getLogger(__name__)


class MongoStore:
    """
    Owns the Mongo client and database for the lifetime of the process.

    Built once at startup and kept on ``app.state.store``. ``init`` binds the
    beanie documents (movies, users, bookings) to this database.
    """

    def __init__(self, client: AsyncIOMotorClient, db_name: str):
        self.client = client
        self.db: AsyncIOMotorDatabase = client[db_name]

    @classmethod
    def from_url(cls, url: str, db_name: str) -> "MongoStore":
        return cls(AsyncIOMotorClient(url), db_name)

    async def init(self) -> None:
        await init_beanie(database=self.db, document_models=DOCUMENT_MODELS)
        logger.info("Connected to MongoDB database %s", self.db.name)

    def collection(self, name: str) -> AsyncIOMotorCollection:
        return self.db[name]


def get_store(request: Request) -> MongoStore:
    store: Optional[MongoStore] = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("MongoStore is not initialised; was the startup event run?")
    return store
