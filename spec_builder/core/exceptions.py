"""
Custom exception classes.

Represent errors raised while loading a spec or building a template.
"""

from typing import Optional


class SpecBuilderError(Exception):
    """Base exception class for spec building."""

    pass


class InvalidConfigError(SpecBuilderError):
    """Raised when a spec value has an unsupported shape."""

    def __init__(self, detail: str, field: Optional[str] = None):
        self.detail = detail
        self.field = field
        if field:
            super().__init__(f"Invalid config at {field}: {detail}")
        else:
            super().__init__(f"Invalid config: {detail}")


class DuplicateTriggerError(SpecBuilderError):
    """Raised when a function declares two triggers of the same family."""

    def __init__(self, function_name: str, trigger_key: str):
        self.function_name = function_name
        self.trigger_key = trigger_key
        super().__init__(
            f"Duplicate trigger '{trigger_key}' declared for function {function_name}"
        )
