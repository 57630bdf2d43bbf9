"""Entry envelope and codec.

Every stored file holds one `Entry`: the canonical key plus the caller's
value. The value type is opaque to the store; pydantic validates and dumps
it, so any type pydantic understands (builtins, containers, dataclasses,
`BaseModel` subclasses, `Any`) can be stored.
"""
from __future__ import annotations
from typing import Any, Generic, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from jsonstorage.errors import CodecError
from .serializer import JSONSerializer, Serializer

T = TypeVar("T")


class Entry(BaseModel, Generic[T]):
    key: str
    value: T


class EntryCodec(Generic[T]):
    """Encode/decode `Entry[T]` envelopes to bytes via a `Serializer`."""

    def __init__(self, value_type: Any = Any, serializer: Serializer | None = None) -> None:
        self.value_type = value_type
        self.serializer = serializer or JSONSerializer()
        self._model = Entry[value_type]  # type: ignore[valid-type]

    def encode(self, key: str, value: T) -> bytes:
        try:
            payload = self._model(key=key, value=value).model_dump(mode="json")
            return self.serializer.dump(payload)
        except (ValueError, TypeError, RecursionError, yaml.YAMLError) as e:
            raise CodecError(f"failed to encode entry {key!r}: {e}") from e

    def decode(self, data: bytes) -> Entry[T]:
        """Parse `data` into an entry.

        Raises `CodecError` for malformed text, a non-mapping document, a
        missing `key`/`value` field or a value that does not validate.
        """
        try:
            payload = self.serializer.load(data)
        except (ValueError, RecursionError, yaml.YAMLError) as e:
            raise CodecError(f"failed to parse entry: {e}") from e
        try:
            return self._model.model_validate(payload)
        except ValidationError as e:
            raise CodecError(f"invalid entry: {e.error_count()} validation error(s)") from e
