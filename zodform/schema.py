"""
Pydantic interop for zodform schemas.

Provides to_annotated() and parse_as() functions.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, Strict, TypeAdapter

from .core import Schema


def to_annotated(schema: Schema[Any]) -> Any:
    """
    Compile a schema to a Pydantic annotated type.

    Args:
        schema: A zodform schema

    Returns:
        An `Annotated[...]` type usable as a Pydantic field annotation

    Usage:
        Email = to_annotated(StringSchema().email("Invalid email"))

        class Signup(BaseModel):
            email: Email

        Signup(email="invalid")  # ValidationError: Invalid email
    """
    match getattr(schema, "kind", None):
        case "string":
            return Annotated[str, Strict(), AfterValidator(_rule_check(schema))]

    raise TypeError(f"Cannot convert {type(schema).__name__} to a Pydantic type")


def parse_as(schema: Schema[Any], value: Any) -> Any:
    """
    Validate a value through Pydantic using the compiled schema.

    Raises:
        pydantic.ValidationError: if the value fails validation
    """
    return TypeAdapter(to_annotated(schema)).validate_python(value)


def _rule_check(schema: Schema[Any]):
    """Wrap schema.parse as a Pydantic after-validator."""

    def check(value: Any) -> Any:
        result = schema.parse(value)
        if not result.is_success:
            raise ValueError(result.error_message)
        return result.data

    return check
