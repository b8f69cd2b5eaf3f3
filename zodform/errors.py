"""
Exceptions for zodform.

Validation failures are returned as Result values; these are only raised when
a caller explicitly asks for one (see Result.unwrap).
"""

from __future__ import annotations

from collections.abc import Mapping


class ZodformError(Exception):
    """Base class for zodform errors."""


class SchemaValidationError(ZodformError, ValueError):
    """Raised when a failed Result is unwrapped."""

    def __init__(self, errors: Mapping[str, str]):
        self.errors = dict(errors)
        message = next(iter(self.errors.values()), "Validation failed")
        super().__init__(message)
