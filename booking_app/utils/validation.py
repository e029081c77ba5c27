from typing import Any, Dict, Sequence, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from booking_app.errors import ValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def format_errors(entity: str, errors: Sequence[Dict[str, Any]]) -> str:
    parts = []
    for err in errors:
        field = ".".join(str(loc) for loc in err["loc"]) or "body"
        parts.append(f"{field}: {err['msg']}")
    return f"{entity} validation failed: " + ", ".join(parts)


def validate_attributes(
    schema: Type[SchemaType], attributes: Any, entity: str
) -> Union[SchemaType, ValidationError]:
    """
    Parse a raw request payload into ``schema``.

    Returns the parsed model on success and a ``ValidationError`` instance
    (not raised) when the payload is missing fields or has the wrong types.
    """
    if not isinstance(attributes, dict):
        return ValidationError(f"{entity} validation failed: body must be a JSON object")
    try:
        return schema.model_validate(attributes)
    except PydanticValidationError as exc:
        return ValidationError(format_errors(entity, exc.errors()))
