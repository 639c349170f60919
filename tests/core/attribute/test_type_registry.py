#!/usr/bin/env python3
import pytest

from modelschema.core.attribute.attribute import Attribute
from modelschema.core.attribute.registry import (
    DEFAULT_REGISTRY,
    TypeRegistry,
    resolve_string_length,
)
from modelschema.core.attribute.resolver import resolve_attribute
from modelschema.core.attribute.type_key import TypeKey


ANY = {"type": ["object", "array", "boolean", "number", "string"]}


def _resolve(payload):
    return resolve_attribute(Attribute.model_validate(payload))


# --- Fixed-shape transforms --- #

@pytest.mark.parametrize("key,expected", [
    ("BIGINT", {"type": "integer", "format": "int64"}),
    ("INTEGER", {"type": "integer", "format": "int32"}),
    ("SMALLINT", {"type": "integer"}),
    ("MEDIUMINT", {"type": "integer"}),
    ("TINYINT", {"type": "number"}),
    ("NUMBER", {"type": "number"}),
    ("DECIMAL", {"type": "number"}),
    ("REAL", {"type": "number"}),
    ("FLOAT", {"type": "number", "format": "float"}),
    ("DOUBLE PRECISION", {"type": "number", "format": "double"}),
    ("BOOLEAN", {"type": "boolean"}),
    ("CHAR", {"type": "string"}),
    ("CIDR", {"type": "string"}),
    ("MACADDR", {"type": "string"}),
    ("DATE", {"type": "string", "format": "date-time"}),
    ("DATEONLY", {"type": "string", "format": "date"}),
    ("TIME", {"type": "string", "format": "time"}),
    ("BLOB", {"type": "string", "contentEncoding": "base64"}),
    ("UUID", {"type": "string", "format": "uuid"}),
    ("UUIDV1", {"type": "string", "format": "uuid"}),
    ("UUIDV4", {"type": "string", "format": "uuid"}),
    ("JSON", ANY),
    ("JSONB", ANY),
    ("INET", {"type": [{"type": "string", "format": "ipv4"}, {"type": "string", "format": "ipv6"}]}),
])
def test_fixed_transforms(key, expected):
    assert _resolve({"type": {"key": key}}) == expected


# --- STRING and its delegates --- #

@pytest.mark.parametrize("key", ["STRING", "TEXT", "CITEXT"])
@pytest.mark.parametrize("length,expected", [
    ("tiny", {"type": "string", "maxLength": 255}),
    ("medium", {"type": "string", "maxLength": 16777215}),
    ("long", {"type": "string", "maxLength": 4294967295}),
    (50, {"type": "string", "maxLength": 50}),
    (None, {"type": "string"}),
])
def test_string_like_lengths(key, length, expected):
    options = {} if length is None else {"length": length}
    assert _resolve({"type": {"key": key, "options": options}}) == expected


def test_string_without_length_has_no_max_length_key():
    assert "maxLength" not in _resolve({"type": "STRING"})


def test_string_shorthand_length():
    assert _resolve({"type": "STRING(tiny)"}) == {"type": "string", "maxLength": 255}
    assert _resolve({"type": "STRING(64)"}) == {"type": "string", "maxLength": 64}


@pytest.mark.parametrize("raw,expected", [
    ("tiny", 255),
    ("TINY", 255),
    ("medium", 16777215),
    ("long", 4294967295),
    (50, 50),
    ("50", 50),
    (None, None),
    (0, None),
    (-3, None),
    (True, None),
    ("huge", None),
    (12.5, None),
])
def test_resolve_string_length(raw, expected):
    assert resolve_string_length(raw) == expected


# --- ENUM --- #

def test_enum_values_order_preserved():
    assert _resolve({"type": "ENUM", "values": ["b", "a", "c"]}) == {"type": "enum", "values": ["b", "a", "c"]}


def test_enum_without_values_is_empty_list():
    assert _resolve({"type": "ENUM"}) == {"type": "enum", "values": []}


# --- Composite types --- #

def test_array_of_integer():
    assert _resolve({"type": "ARRAY(INTEGER)"}) == {
        "type": "array",
        "items": {"type": "integer", "format": "int32"},
    }


def test_array_without_element_type_has_loose_items():
    assert _resolve({"type": "ARRAY"}) == {"type": "array", "items": ANY}


def test_nested_arrays():
    assert _resolve({"type": "ARRAY(ARRAY(STRING(10)))"}) == {
        "type": "array",
        "items": {"type": "array", "items": {"type": "string", "maxLength": 10}},
    }


def test_virtual_uses_return_type():
    assert _resolve({"type": "VIRTUAL", "returnType": "BOOLEAN"}) == {"type": "boolean"}
    assert _resolve({"type": "VIRTUAL(DATEONLY)"}) == {"type": "string", "format": "date"}


def test_virtual_without_return_type_is_loose():
    assert _resolve({"type": "VIRTUAL"}) == ANY


# --- Registry API --- #

def test_default_registry_covers_every_type_key():
    assert sorted(DEFAULT_REGISTRY.keys()) == sorted(k.value for k in TypeKey)
    assert len(DEFAULT_REGISTRY) == len(TypeKey)


@pytest.mark.parametrize("key", [TypeKey.STRING, "STRING", " string ", "double precision"])
def test_get_accepts_enum_and_raw_strings(key):
    assert DEFAULT_REGISTRY.get(key) is not None
    assert key in DEFAULT_REGISTRY


@pytest.mark.parametrize("key", [None, "GEOMETRY", "HSTORE", "RANGE", ""])
def test_get_unknown_returns_none(key):
    assert DEFAULT_REGISTRY.get(key) is None


def test_contains_rejects_non_strings():
    assert 5 not in DEFAULT_REGISTRY


def test_extend_returns_new_registry_and_leaves_original_untouched():
    def geometry(att, resolve):
        return {"type": "object", "format": "geojson"}

    extended = DEFAULT_REGISTRY.extend({"geometry": geometry})

    assert "GEOMETRY" in extended
    assert "GEOMETRY" not in DEFAULT_REGISTRY
    assert len(extended) == len(DEFAULT_REGISTRY) + 1
    assert resolve_attribute(Attribute.model_validate("GEOMETRY"), extended) == {"type": "object", "format": "geojson"}


def test_extend_can_override_existing_key():
    registry = DEFAULT_REGISTRY.extend({TypeKey.TINYINT: lambda att, resolve: {"type": "integer"}})
    assert resolve_attribute(Attribute.model_validate("TINYINT"), registry) == {"type": "integer"}
    assert resolve_attribute(Attribute.model_validate("TINYINT")) == {"type": "number"}


def test_composite_recursion_uses_the_same_registry():
    registry = TypeRegistry({
        "ARRAY": DEFAULT_REGISTRY.get("ARRAY"),
        "CUSTOM": lambda att, resolve: {"type": "string", "format": "custom"},
    })
    assert resolve_attribute(Attribute.model_validate("ARRAY(CUSTOM)"), registry) == {
        "type": "array",
        "items": {"type": "string", "format": "custom"},
    }
    # INTEGER is not registered here, so the element falls back
    assert resolve_attribute(Attribute.model_validate("ARRAY(INTEGER)"), registry) == {"type": "array", "items": ANY}


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        DEFAULT_REGISTRY._transforms["GEOMETRY"] = lambda att, resolve: {}  # type: ignore[index]
