"""Argument validation against a tool's parameter schema."""
from typing import Any, Optional

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .definitions import ToolDefinition
from .errors import ValidationError


def _field_path(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "arguments"


def _describe(field: str, constraint: str, message: str) -> str:
    if constraint == "missing":
        return f"Missing required parameter '{field}'"
    return f"Invalid value for '{field}': {message}"


def validate_arguments(definition: ToolDefinition, arguments: Optional[Any]) -> BaseModel:
    """Parse raw arguments into the tool's parameter model.

    Undeclared fields are dropped and values are coerced to the declared
    types. No I/O happens here.

    Raises:
        ValidationError: Names the first failing field and carries all failures
    """
    try:
        return definition.schema.model_validate(arguments if arguments is not None else {})
    except PydanticValidationError as e:
        failures = [
            {
                "field": _field_path(error["loc"]),
                "constraint": error["type"],
                "message": error["msg"],
            }
            for error in e.errors()
        ]
        first = failures[0]
        raise ValidationError(
            _describe(first["field"], first["constraint"], first["message"]),
            field=first["field"],
            constraint=first["constraint"],
            errors=failures,
        ) from e
