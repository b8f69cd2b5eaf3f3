"""
zodform - chainable validation schemas for form fields.

Usage:
    from zodform import StringSchema, FormField

    schema = StringSchema().min(5, "Too short").email("Invalid email")

    result = schema.parse("test@example.com")
    result.is_success      # True
    result.data            # "test@example.com"

    schema.parse("hi").error_message  # "Too short"

    field = FormField(schema, live_validation=True)
    field.text = "invalid"
    field.error            # "Invalid email"
"""

from .context import form_context, is_live
from .core import EMAIL_PATTERN, TYPE_MESSAGE, Schema, StringSchema
from .errors import SchemaValidationError, ZodformError
from .field import FormField
from .schema import parse_as, to_annotated
from .types import VALUE_KEY, Errors, Result

__all__ = [
    # Result types
    "Result",
    "Errors",
    "VALUE_KEY",
    # Core
    "Schema",
    "StringSchema",
    "EMAIL_PATTERN",
    "TYPE_MESSAGE",
    # Form binding
    "FormField",
    "form_context",
    "is_live",
    # Pydantic
    "to_annotated",
    "parse_as",
    # Errors
    "ZodformError",
    "SchemaValidationError",
]
