"""Exception hierarchy for jsonstorage.

Callers can catch `StorageError` for any failure raised by the store, or
the specific subclasses below. Exceptions raised by caller-supplied
callbacks (`range` visitors, `edit` transforms) are never wrapped.
"""
from __future__ import annotations


class StorageError(Exception):
    """Base exception for all jsonstorage failures."""


class NotExistError(StorageError, KeyError):
    """Raised when a key has no stored entry.

    Subclasses `KeyError` so mapping-style callers can keep using
    ``except KeyError``.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"entry does not exist: {self.key}"


class InternalError(StorageError):
    """Raised for unexpected I/O or decode failures.

    The underlying exception is kept on `cause` and chained as
    ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class CodecError(StorageError, ValueError):
    """Raised when an entry cannot be encoded or decoded."""


class ConfigError(StorageError):
    """Raised for invalid configuration values."""
