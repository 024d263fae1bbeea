# src/textseg/errors.py

"""
errors.py.

Does: Define the programmer-error exceptions raised by segmentation and helper calls.
Returns: PreconditionViolation, InvalidOption, DuplicateKeyError.
Used by: Every public function that validates its arguments; callers catch them per type.

"No match" is never an error: trimming, splitting and tokenizing absorb empty
input and non-matching patterns by returning a well-defined result.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

__all__ = [
    "PreconditionViolation",
    "InvalidOption",
    "DuplicateKeyError",
    "require",
]


class PreconditionViolation(ValueError):
    """Raise when a required argument is None."""

    def __init__(self, argument: str, message: str | None = None):
        self.argument = argument
        super().__init__(message or f"'{argument}' is required and must not be None")


class InvalidOption(ValueError):
    """Raise when an enumerated option or index lies outside its accepted values."""

    def __init__(
        self,
        option: str,
        value: Any,
        message: str | None = None,
        *,
        choices: Iterable[str] = (),
        suggestion: str | None = None,
    ):
        self.option = option
        self.value = value
        self.choices = tuple(choices)
        self.suggestion = suggestion
        if message is None:
            message = f"invalid value {value!r} for '{option}'"
            if self.choices:
                message += f" (expected one of: {', '.join(self.choices)})"
        if suggestion:
            message += f"; did you mean {suggestion!r}?"
        super().__init__(message)


class DuplicateKeyError(KeyError):
    """Raise when a merge would overwrite a key that already exists."""

    def __str__(self) -> str:
        return f"key {self.args[0]!r} already exists"


def require(value: Any, argument: str) -> Any:
    """Does: Return `value` unchanged, or raise PreconditionViolation when it is None."""
    if value is None:
        raise PreconditionViolation(argument)
    return value
