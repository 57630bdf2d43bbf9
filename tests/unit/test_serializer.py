import json

import pytest
import yaml

from jsonstorage.errors import ConfigError
from jsonstorage.storage.serializer import JSONSerializer, YAMLSerializer, get_serializer


def test_json_serializer_roundtrip():
    s = JSONSerializer()
    data = s.dump({"key": "k", "value": [1, "two", None]})
    assert isinstance(data, bytes)
    assert data.endswith(b"\n")
    assert json.loads(data) == {"key": "k", "value": [1, "two", None]}
    assert s.load(data) == {"key": "k", "value": [1, "two", None]}
    assert s.extension == ".json"


def test_json_serializer_keeps_unicode_readable():
    data = JSONSerializer().dump({"name": "café"})
    assert "café".encode("utf-8") in data


def test_yaml_serializer_roundtrip_preserves_order():
    s = YAMLSerializer()
    data = s.dump({"key": "k", "value": {"b": 1, "a": 2}})
    assert data.decode("utf-8").index("key") < data.decode("utf-8").index("value")
    assert yaml.safe_load(data) == {"key": "k", "value": {"b": 1, "a": 2}}
    assert s.load(data) == {"key": "k", "value": {"b": 1, "a": 2}}
    assert s.extension == ".yaml"


def test_get_serializer_by_name():
    assert isinstance(get_serializer("json"), JSONSerializer)
    assert isinstance(get_serializer("YAML"), YAMLSerializer)
    assert isinstance(get_serializer("yml"), YAMLSerializer)


def test_get_serializer_unknown():
    with pytest.raises(ConfigError):
        get_serializer("pickle")
