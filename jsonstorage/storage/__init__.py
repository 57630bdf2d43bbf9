"""Storage package for jsonstorage."""
from typing import Any, Optional
from pathlib import Path

from jsonstorage.errors import ConfigError
from .base import KeyValueStorage
from .entry import Entry, EntryCodec
from .file_backend import FileStorage
from .memory_backend import MemoryStorage
from .rwlock import RWLock
from .serializer import JSONSerializer, Serializer, YAMLSerializer, get_serializer

__all__ = [
    "KeyValueStorage",
    "FileStorage",
    "MemoryStorage",
    "Entry",
    "EntryCodec",
    "RWLock",
    "Serializer",
    "JSONSerializer",
    "YAMLSerializer",
    "get_serializer",
    "create_storage",
]


def create_storage(
    backend: str = "file",
    serializer: str = "json",
    data_dir: Optional[str | Path] = "./data",
    value_type: Any = Any,
) -> KeyValueStorage:
    """Build a storage instance by name.

    `backend` is 'file' or 'memory'; `serializer` is 'json' or 'yaml'.
    `data_dir` is only used by the file backend.
    """
    ser = get_serializer(serializer)
    if backend == "file":
        if data_dir is None:
            raise ConfigError("file backend requires a data_dir")
        return FileStorage(data_dir, value_type=value_type, serializer=ser)
    if backend == "memory":
        return MemoryStorage(value_type=value_type, serializer=ser)
    raise ConfigError(f"unknown storage backend {backend!r}: expected 'file' or 'memory'")
