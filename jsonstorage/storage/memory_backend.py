"""Simple memory-backed key-value storage

Entries are kept in memory as encoded bytes keyed by canonical key, so
stored values are isolated copies and go through the same validation as
the file backend. Nothing is persisted.
"""
from typing import Any, Callable, Dict, Optional, TypeVar

from jsonstorage.errors import CodecError, InternalError, NotExistError
from jsonstorage.util import canonical_key
from .base import KeyValueStorage
from .entry import EntryCodec
from .rwlock import RWLock
from .serializer import Serializer

T = TypeVar("T")


class MemoryStorage(KeyValueStorage[T]):
    def __init__(self, value_type: Any = Any, serializer: Optional[Serializer] = None):
        self._lock = RWLock()
        self._store: Dict[str, bytes] = {}
        self.codec: EntryCodec[T] = EntryCodec(value_type, serializer)

    def _decode(self, key: str, data: bytes) -> T:
        try:
            return self.codec.decode(data).value
        except CodecError as e:
            raise InternalError(f"failed to decode entry {key!r}: {e}", cause=e) from e

    def _encode(self, key: str, value: T) -> bytes:
        try:
            return self.codec.encode(key, value)
        except CodecError as e:
            raise InternalError(f"failed to put entry {key!r}: {e}", cause=e) from e

    def get(self, key: str) -> T:
        key = canonical_key(key)
        with self._lock.read_locked():
            data = self._store.get(key)
        if data is None:
            raise NotExistError(key)
        return self._decode(key, data)

    def put(self, key: str, value: T) -> None:
        key = canonical_key(key)
        data = self._encode(key, value)
        with self._lock.write_locked():
            self._store[key] = data

    def edit(self, key: str, transform: Callable[[T], T]) -> T:
        key = canonical_key(key)
        with self._lock.write_locked():
            data = self._store.get(key)
            if data is None:
                raise NotExistError(key)
            new_value = transform(self._decode(key, data))
            self._store[key] = self._encode(key, new_value)
        return new_value

    def delete(self, key: str) -> None:
        with self._lock.write_locked():
            self._store.pop(canonical_key(key), None)

    def range(self, visit: Callable[[str, T], None]) -> None:
        with self._lock.read_locked():
            for key, data in self._store.items():
                visit(key, self._decode(key, data))

    def exists(self, key: str) -> bool:
        with self._lock.read_locked():
            return canonical_key(key) in self._store
