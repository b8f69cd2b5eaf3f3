"""
Context manager for form configuration (e.g., live validation).
"""

from contextlib import contextmanager
from contextvars import ContextVar

# Context variable for the default live-validation setting
_live_validation: ContextVar[bool] = ContextVar("live_validation", default=False)


def is_live() -> bool:
    """Check if fields created now should validate on every change."""
    return _live_validation.get()


@contextmanager
def form_context(*, live_validation: bool = False):
    """
    Context manager for form configuration.

    Args:
        live_validation: If True, FormFields created without an explicit
                        `live_validation` argument re-validate on every text
                        change instead of only on submission.

    Example:
        from zodform import FormField, StringSchema, form_context

        schema = StringSchema().min(5, "Too short")

        # Normal: errors only appear after validate()
        field = FormField(schema)

        # Live: errors follow each keystroke
        with form_context(live_validation=True):
            field = FormField(schema)
    """
    token = _live_validation.set(live_validation)
    try:
        yield
    finally:
        _live_validation.reset(token)
