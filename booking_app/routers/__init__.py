from typing import Any, Dict, Type

from pydantic import BaseModel


def json_body(schema: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI request body for routes that take a raw dict and validate it themselves."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": schema.model_json_schema(by_alias=True)}},
        }
    }
