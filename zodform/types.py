"""
Type definitions for zodform.

Provides the Result type and shared aliases.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Generic, TypeVar

from .errors import SchemaValidationError

T = TypeVar("T")

# Type aliases
Errors = Mapping[str, str]

# Every failure is reported under this single key
VALUE_KEY = "value"


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):
    """
    Outcome of evaluating a schema against one value.

    Exactly one variant: a success holding `data`, or a failure holding a
    read-only `errors` mapping. Build it through `Result.success` /
    `Result.failure`.
    """

    is_success: bool
    data: T | None = None
    errors: Errors | None = None

    def __post_init__(self) -> None:
        if self.is_success:
            if self.errors is not None:
                raise ValueError("A successful Result cannot carry errors")
            return

        if self.errors is None:
            raise ValueError("A failed Result requires an errors mapping")
        if self.data is not None:
            raise ValueError("A failed Result cannot carry data")
        # Copy so the caller's mapping cannot change this result
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))

    @classmethod
    def success(cls, data: T) -> Result[T]:
        return cls(is_success=True, data=data, errors=None)

    @classmethod
    def failure(cls, errors: Mapping[str, str]) -> Result[Any]:
        return cls(is_success=False, data=None, errors=errors)

    @property
    def error_message(self) -> str | None:
        """First error message, or None on success."""
        if not self.errors:
            return None
        return next(iter(self.errors.values()))

    def unwrap(self) -> T:
        """
        Return the validated value.

        Raises:
            SchemaValidationError: if this is a failure
        """
        if not self.is_success:
            raise SchemaValidationError(self.errors or {})
        return self.data  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.is_success
