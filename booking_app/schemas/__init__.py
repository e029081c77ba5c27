from __future__ import annotations

from pydantic import BaseModel, ConfigDict


# Shared Pydantic base (Pydantic v2); camelCase aliases are declared per field
class ORMModel(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
