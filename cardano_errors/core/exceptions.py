"""
Package exceptions.

The normalizer itself never raises for malformed input; these are raised by
the method-interception wrapper so callers can catch one exception type and
branch on its code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cardano_errors.core.codes import ErrorCode
    from cardano_errors.core.models import NormalizedError


class CardanoErrorsException(Exception):
    """Base class for exceptions raised by cardano_errors."""


class CardanoAppError(CardanoErrorsException):
    """A normalized error re-raised in place of the original exception."""

    def __init__(self, error: "NormalizedError") -> None:
        super().__init__(error.message)
        self.error = error

    @property
    def code(self) -> "ErrorCode":
        return self.error.code

    def __repr__(self) -> str:
        return f"CardanoAppError(code={self.error.code.value!r}, message={self.error.message!r})"
