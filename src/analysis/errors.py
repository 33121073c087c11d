"""
Analysis Errors

The analysis core never fails on well-typed input. The only error it raises
is InvalidInput, before any computation starts.
"""

from typing import Any, Optional


class InvalidInput(Exception):
    """Raised when a caller violates the input contract (e.g. non-string text)."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value


def require_text(text: Any, field: str = "text") -> str:
    """Fail fast on non-string text instead of coercing it."""
    if not isinstance(text, str):
        raise InvalidInput(
            f"{field} must be a string, got {type(text).__name__}",
            field=field,
            value=text,
        )
    return text
