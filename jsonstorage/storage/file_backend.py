"""File-backed key-value storage: one serialized entry per file.

Entries live under ``<directory>/<escaped-lowercased-key><ext>`` where
`<ext>` comes from the serializer (``.json`` by default). Each file holds a
``{key, value}`` envelope. Nothing is cached in memory; every call goes to
disk under a per-instance readers-writer lock.
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Callable, TypeVar
import logging

from jsonstorage.errors import CodecError, InternalError, NotExistError
from jsonstorage.util import canonical_key, entry_path
from . import fs
from .base import KeyValueStorage
from .entry import Entry, EntryCodec
from .rwlock import RWLock
from .serializer import JSONSerializer, Serializer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FileStorage(KeyValueStorage[T]):
    """Store values of type `T` as individual files under `directory`.

    The directory is created on the first write; a store whose directory
    does not exist yet behaves as empty. Two instances pointed at the same
    directory are not synchronized with each other.
    """

    def __init__(
        self,
        directory: str | Path,
        value_type: Any = Any,
        serializer: Serializer | None = None,
    ) -> None:
        self.directory = Path(directory)
        self.serializer = serializer or JSONSerializer()
        self.codec: EntryCodec[T] = EntryCodec(value_type, self.serializer)
        self._lock = RWLock()

    def __repr__(self) -> str:
        return f"FileStorage(directory={str(self.directory)!r}, extension={self.serializer.extension!r})"

    def _path_for(self, key: str) -> Path:
        return entry_path(self.directory, key, self.serializer.extension)

    def _internal(self, action: str, err: BaseException) -> InternalError:
        logger.warning("%s under %s: %s", action, self.directory, err)
        return InternalError(f"{action}: {err}", cause=err)

    def _read(self, path: Path) -> Entry[T]:
        return fs.read_file(path, lambda f: self.codec.decode(f.read()))

    def _write(self, path: Path, key: str, value: T) -> None:
        try:
            data = self.codec.encode(key, value)
            fs.write_file(path, lambda f: f.write(data))
        except (OSError, CodecError) as e:
            raise self._internal(f"failed to put entry {key!r}", e) from e

    def range(self, visit: Callable[[str, T], None]) -> None:
        with self._lock.read_locked():
            try:
                children = fs.list_dir(self.directory)
            except FileNotFoundError:
                logger.debug("range: %s does not exist, nothing to visit", self.directory)
                return
            except OSError as e:
                raise self._internal("failed to range entries", e) from e

            ext = self.serializer.extension
            for child in children:
                if child.is_dir or not child.name.endswith(ext):
                    continue
                try:
                    entry = self._read(self.directory / child.name)
                except FileNotFoundError:
                    # removed between listing and reading
                    continue
                except (OSError, CodecError) as e:
                    raise self._internal(f"failed to range entries at {child.name}", e) from e
                visit(entry.key, entry.value)

    def get(self, key: str) -> T:
        key = canonical_key(key)
        path = self._path_for(key)
        logger.debug("get %s", key)
        with self._lock.read_locked():
            try:
                entry = self._read(path)
            except FileNotFoundError:
                raise NotExistError(key) from None
            except (OSError, CodecError) as e:
                raise self._internal(f"failed to get entry {key!r}", e) from e
        return entry.value

    def put(self, key: str, value: T) -> None:
        key = canonical_key(key)
        path = self._path_for(key)
        logger.debug("put %s", key)
        with self._lock.write_locked():
            self._write(path, key, value)

    def edit(self, key: str, transform: Callable[[T], T]) -> T:
        key = canonical_key(key)
        path = self._path_for(key)
        logger.debug("edit %s", key)
        with self._lock.write_locked():
            try:
                entry = self._read(path)
            except FileNotFoundError:
                raise NotExistError(key) from None
            except (OSError, CodecError) as e:
                raise self._internal(f"failed to edit entry {key!r}", e) from e
            new_value = transform(entry.value)
            self._write(path, key, new_value)
        return new_value

    def delete(self, key: str) -> None:
        key = canonical_key(key)
        path = self._path_for(key)
        logger.debug("delete %s", key)
        with self._lock.write_locked():
            try:
                if fs.exists(path):
                    fs.remove(path)
            except FileNotFoundError:
                pass
            except OSError as e:
                raise self._internal(f"failed to delete entry {key!r}", e) from e

    def exists(self, key: str) -> bool:
        path = self._path_for(canonical_key(key))
        with self._lock.read_locked():
            return fs.exists(path)
