"""
Input validation helpers shared by the controllers.
"""

from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from orders_api.core.exceptions import BadRequestException
from orders_api.schemas import IdentifierParams

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def validation_issues(error: ValidationError) -> list[dict[str, Any]]:
    """JSON-safe issue list from a pydantic error."""
    return error.errors(include_url=False, include_context=False, include_input=False)


def validate(schema: type[SchemaT], data: Any) -> SchemaT:
    """Parse raw input with ``schema`` or raise BadRequest with the issues."""
    try:
        return schema.model_validate({} if data is None else data)
    except ValidationError as e:
        raise BadRequestException("Validation error!", validation_issues(e))


def validate_id(value: Any) -> int:
    return validate(IdentifierParams, {"id": value}).id
