import logging
from typing import Any, Generic, Optional, Type, TypeVar

from beanie import Document, PydanticObjectId
from bson.errors import InvalidId
from pydantic import BaseModel
from pymongo.errors import PyMongoError

from booking_app.errors import StoreError, ValidationError
from booking_app.utils.validation import validate_attributes

ModelType = TypeVar("ModelType", bound=Document)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)

logger = logging.getLogger(__name__)


class MongoCRUD(Generic[ModelType, CreateSchemaType]):
    def __init__(self, model: Type[ModelType], create_schema: Type[CreateSchemaType]):
        self.model = model
        self.create_schema = create_schema

    @property
    def entity(self) -> str:
        return self.model.__name__

    # -------- GET BY ID --------
    async def get(self, id: Any) -> Optional[ModelType]:
        try:
            oid = PydanticObjectId(id)
        except (InvalidId, TypeError):
            return None
        try:
            return await self.model.get(oid)
        except PyMongoError as exc:
            logger.error("%s lookup failed: %s", self.entity, exc)
            raise StoreError(str(exc), status_code=400) from exc

    # -------- CREATE --------
    def validate(self, attributes: Any):
        return validate_attributes(self.create_schema, attributes, self.entity)

    async def create(self, attributes: Any) -> ModelType:
        obj_in = self.validate(attributes)
        if isinstance(obj_in, ValidationError):
            raise obj_in
        return await self.insert(obj_in)

    async def insert(self, obj_in: CreateSchemaType) -> ModelType:
        obj = self.model(**obj_in.model_dump(by_alias=True))
        try:
            await obj.insert()
        except PyMongoError as exc:
            logger.error("%s insert failed: %s", self.entity, exc)
            raise StoreError(str(exc), status_code=400) from exc
        return obj
