"""File-per-entry key-value storage with pluggable text serializers."""

from .errors import CodecError, ConfigError, InternalError, NotExistError, StorageError
from .storage import (
    FileStorage,
    JSONSerializer,
    KeyValueStorage,
    MemoryStorage,
    YAMLSerializer,
    create_storage,
)

__all__ = [
    "StorageError",
    "NotExistError",
    "InternalError",
    "CodecError",
    "ConfigError",
    "KeyValueStorage",
    "FileStorage",
    "MemoryStorage",
    "JSONSerializer",
    "YAMLSerializer",
    "create_storage",
]
