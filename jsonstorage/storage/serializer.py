from typing import Any, Protocol
import json
import yaml

from jsonstorage.errors import ConfigError


class Serializer(Protocol):
    """Serialize/deserialize plain Python data for file-backed stores.

    Implementations should be symmetric: `dump` -> bytes, `load` <- bytes.
    `extension` is the file suffix (with leading dot) used for entries
    written with this serializer.
    """

    extension: str

    def dump(self, value: Any) -> bytes: ...

    def load(self, data: bytes) -> Any: ...


class JSONSerializer:
    """Serializer using JSON (text). Caller must ensure values are JSON-serializable."""

    extension = ".json"

    def dump(self, value: Any) -> bytes:
        return (json.dumps(value, ensure_ascii=False, indent=2) + "\n").encode("utf-8")

    def load(self, data: bytes) -> Any:
        return json.loads(data.decode("utf-8"))


class YAMLSerializer:
    """Serializer using YAML (text). Caller must ensure values are YAML-serializable."""

    extension = ".yaml"

    def dump(self, value: Any) -> bytes:
        return yaml.safe_dump(value, sort_keys=False, allow_unicode=True).encode("utf-8")

    def load(self, data: bytes) -> Any:
        return yaml.safe_load(data.decode("utf-8"))


_SERIALIZERS = {
    "json": JSONSerializer,
    "yaml": YAMLSerializer,
    "yml": YAMLSerializer,
}


def get_serializer(name: str) -> Serializer:
    """Return a serializer instance for `name` ('json' or 'yaml')."""
    try:
        return _SERIALIZERS[name.lower()]()
    except KeyError:
        raise ConfigError(
            f"unknown serializer {name!r}: expected one of {sorted(_SERIALIZERS)}"
        ) from None
