"""Tests for SerializerRegistry."""

import pytest

from json_core import JSON_SERIALIZER, SerializerNotFoundError, obj
from json_core.registry import SerializerRegistry, default_registry
from json_core.serializer import ConverterSerializer
from json_core.values import JAssoc, JNumber, JString, Json


class Base:
    pass


class Child(Base):
    pass


BASE = ConverterSerializer(lambda b: JString("base"), lambda j: Base())


def test_default_registry_has_json():
    assert default_registry.resolve(Json) is JSON_SERIALIZER


def test_json_variants_resolve_through_mro():
    assert default_registry.resolve(JNumber) is JSON_SERIALIZER
    assert default_registry.resolve(JAssoc) is JSON_SERIALIZER


def test_register_and_resolve():
    registry = SerializerRegistry()
    registry.register(Base, BASE)
    assert registry.resolve(Base) is BASE
    assert Base in registry


def test_subclass_uses_base_serializer():
    registry = SerializerRegistry()
    registry.register(Base, BASE)
    assert registry.resolve(Child) is BASE


def test_subclass_override():
    registry = SerializerRegistry()
    child = ConverterSerializer(lambda c: JString("child"), lambda j: Child())
    registry.register(Base, BASE)
    registry.register(Child, child)
    assert registry.resolve(Child) is child
    assert registry.resolve(Base) is BASE


def test_resolve_missing():
    registry = SerializerRegistry()
    assert registry.resolve(int) is None
    assert int not in registry
    assert "not a type" not in registry


def test_require_missing_raises():
    registry = SerializerRegistry()
    with pytest.raises(SerializerNotFoundError):
        registry.require(Base)


def test_require_found():
    serializer = default_registry.require(Json)
    assert serializer.to_json_string(obj(("a", 1))) == '{"a":1}'
