"""Exception hierarchy for conslist."""

from __future__ import annotations


class ConsListError(Exception):
    """Base class for all conslist errors."""


class DecodeError(ConsListError, ValueError):
    """External data could not be decoded into a list.

    Attributes:
        index: Position of the offending element, or None when the
            document itself is malformed.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index

    def __str__(self) -> str:
        message = super().__str__()
        if self.index is None:
            return message
        return f"element {self.index}: {message}"


class BorrowError(ConsListError, RuntimeError):
    """A list was accessed while a conflicting iteration view was live."""


class ConfigError(ConsListError):
    """Configuration file is unreadable or invalid."""
