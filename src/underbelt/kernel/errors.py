"""Error types raised by underbelt operations."""

from __future__ import annotations


class UnderbeltError(Exception):
    """Base error for all underbelt operations.

    The offending input is kept on ``value`` for debugging.
    """

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({super().__str__()!r}, value={self.value!r})"


class InvalidOperation(UnderbeltError, ValueError):
    """The operation is undefined for the given input."""


class TypeMismatch(UnderbeltError, TypeError):
    """An element does not have the shape the operation needs."""
