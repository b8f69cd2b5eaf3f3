"""
FormField: binds a schema to one editable text value.

The host UI owns rendering. It pushes text changes in through `text` and
renders whatever `error` holds (None means no visible error).
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from .context import is_live
from .core import Schema

_log = logging.getLogger("zodform.field")

ErrorListener = Callable[[Optional[str]], Any]


class FormField:
    """
    Text value validated by a schema on change and/or on submission.

    With `live_validation` on, every text change evaluates the schema.
    `validate()` always evaluates and is meant for form submission.
    """

    def __init__(
        self,
        schema: Schema[Any],
        text: str = "",
        *,
        live_validation: Optional[bool] = None,
        on_error: Optional[ErrorListener] = None,
    ):
        """
        Args:
            schema: Schema to evaluate the text with
            text: Initial text (not validated)
            live_validation: Validate on every change; defaults to the
                            active form_context setting
            on_error: Called with the new message whenever `error` changes
        """
        self.schema = schema
        self.live_validation = is_live() if live_validation is None else live_validation
        self.on_error = on_error
        self._text = text
        self._error: Optional[str] = None

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        self.set_text(value)

    @property
    def error(self) -> Optional[str]:
        """Message currently displayed for this field."""
        return self._error

    @property
    def is_valid(self) -> bool:
        return self.schema.parse(self._text).is_success

    def set_text(self, value: str) -> None:
        """Record a text change, validating it when live validation is on."""
        self._text = value
        if self.live_validation:
            self._evaluate()

    def validate(self) -> Optional[str]:
        """Validate the current text for submission and return the message."""
        return self._evaluate()

    def clear_error(self) -> None:
        self._set_error(None)

    def _evaluate(self) -> Optional[str]:
        result = self.schema.parse(self._text)
        _log.debug(
            "Validated %d chars with %r: %s",
            len(self._text),
            self.schema,
            "ok" if result.is_success else "failed",
        )
        self._set_error(result.error_message)
        return result.error_message

    def _set_error(self, message: Optional[str]) -> None:
        if message == self._error:
            return
        self._error = message
        if self.on_error is not None:
            self.on_error(message)

    def __repr__(self) -> str:
        return f"FormField(text={self._text!r}, error={self._error!r})"
