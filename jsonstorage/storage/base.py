"""Key-value storage interface definitions.

Defines the KeyValueStorage abstract class implemented by the file and
memory backends. Keys are case-insensitive: every implementation folds
them to their canonical (lowercased) form before use.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

T = TypeVar("T")


class KeyValueStorage(ABC, Generic[T]):
    """Abstract key-value storage for values of type `T`.

    Implementations must be thread-safe: reads (`get`, `range`) may run
    concurrently, writes (`put`, `edit`, `delete`) are exclusive. Callbacks
    passed to `range` and `edit` must not call any operation of the same
    store: the lock is not reentrant and a queued writer blocks new readers.
    """

    @abstractmethod
    def get(self, key: str) -> T:
        """Return the value stored under `key`.

        Raises `NotExistError` if the key is absent and `InternalError` for
        any other failure.
        """

    @abstractmethod
    def put(self, key: str, value: T) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    def edit(self, key: str, transform: Callable[[T], T]) -> T:
        """Atomically replace the value under `key` with `transform(value)`.

        Returns the new value. Raises `NotExistError` (without calling
        `transform`) if the key is absent. Exceptions raised by `transform`
        propagate unchanged and nothing is written.
        """

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete `key`. Deleting an absent key is not an error."""

    @abstractmethod
    def range(self, visit: Callable[[str, T], None]) -> None:
        """Call `visit(key, value)` for every stored entry.

        Stops at the first exception raised by `visit` and lets it
        propagate unchanged.
        """

    @abstractmethod
    def exists(self, key: str) -> bool:
        """Return True if `key` has a stored entry."""

    def keys(self) -> list[str]:
        """Return the canonical keys of all stored entries."""
        found: list[str] = []
        self.range(lambda key, _value: found.append(key))
        return found
