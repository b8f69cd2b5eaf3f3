"""
Core schema classes for zodform.

Provides the Schema protocol and the chainable StringSchema rule-set.
"""

from __future__ import annotations

import re
from typing import Any, ClassVar, Protocol, TypeVar, runtime_checkable

from .types import VALUE_KEY, Result

T_co = TypeVar("T_co", covariant=True)

TYPE_MESSAGE = "Must be a string"

# Loose "something@something.something" shape, matched from the start only
EMAIL_PATTERN = re.compile(r"^[^@]+@[^@]+\.[^@]+")


@runtime_checkable
class Schema(Protocol[T_co]):
    """
    Evaluation contract shared by every schema variant.

    Variants are independent classes tagged with `kind`; they do not
    inherit from a common base.
    """

    kind: ClassVar[str]

    def parse(self, value: Any) -> Result[T_co]: ...

    @property
    def error_message(self) -> str | None: ...


def _check_length(length: Any) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f"Length must be an int, got {type(length).__name__}")
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    return length


class StringSchema:
    """
    Rule-set for string values.

    Configure it by chaining; each call mutates and returns the same instance:

        schema = StringSchema().min(5, "Too short").max(50, "Too long").email("Bad")
        schema.parse("test@example.com").is_success  # True

    Rules run in a fixed order (type, min, max, email) and evaluation stops at
    the first failure. Calling a configurator twice keeps only the last value.
    """

    kind: ClassVar[str] = "string"

    def __init__(self) -> None:
        self.min_length: int | None = None
        self.min_message: str | None = None
        self.max_length: int | None = None
        self.max_message: str | None = None
        self.is_email: bool = False
        self.email_message: str | None = None

    def min(self, length: int, message: str) -> StringSchema:
        """Require at least `length` characters."""
        self.min_length = _check_length(length)
        self.min_message = message
        return self

    def max(self, length: int, message: str) -> StringSchema:
        """Allow at most `length` characters."""
        self.max_length = _check_length(length)
        self.max_message = message
        return self

    def email(self, message: str) -> StringSchema:
        """Require a something@something.something shape."""
        self.is_email = True
        self.email_message = message
        return self

    @property
    def error_message(self) -> str | None:
        return None

    def parse(self, value: Any) -> Result[str]:
        """
        Evaluate `value` against the configured rules.

        Returns:
            Result.success(value) if every rule passes
            Result.failure({"value": message}) for the first rule that fails
        """
        if not isinstance(value, str):
            return Result.failure({VALUE_KEY: TYPE_MESSAGE})

        if self.min_length is not None and len(value) < self.min_length:
            return Result.failure({VALUE_KEY: self.min_message or ""})

        if self.max_length is not None and len(value) > self.max_length:
            return Result.failure({VALUE_KEY: self.max_message or ""})

        if self.is_email and EMAIL_PATTERN.match(value) is None:
            return Result.failure({VALUE_KEY: self.email_message or ""})

        return Result.success(value)

    evaluate = parse

    def __repr__(self) -> str:
        rules = []
        if self.min_length is not None:
            rules.append(f"min={self.min_length}")
        if self.max_length is not None:
            rules.append(f"max={self.max_length}")
        if self.is_email:
            rules.append("email")
        return f"StringSchema({', '.join(rules)})"
