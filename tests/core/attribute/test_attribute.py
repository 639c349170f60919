#!/usr/bin/env python3
import pytest
from pydantic import ValidationError

from modelschema.core.attribute.attribute import Attribute, DataType, parse_type_shorthand


# --- Shorthand parsing --- #

@pytest.mark.parametrize("text,expected", [
    ("INTEGER", {"key": "INTEGER"}),
    (" string ", {"key": "STRING"}),
    ("STRING(50)", {"key": "STRING", "options": {"length": 50}}),
    ("string( tiny )", {"key": "STRING", "options": {"length": "tiny"}}),
    ("STRING()", {"key": "STRING"}),
    ("ARRAY(INTEGER)", {"key": "ARRAY", "type": "INTEGER"}),
    ("ARRAY(STRING(20))", {"key": "ARRAY", "type": "STRING(20)"}),
    ("VIRTUAL(BOOLEAN)", {"key": "VIRTUAL", "return_type": "BOOLEAN"}),
    ("double precision", {"key": "DOUBLE PRECISION"}),
])
def test_parse_type_shorthand(text, expected):
    assert parse_type_shorthand(text) == expected


# --- DataType --- #

def test_datatype_from_shorthand_string():
    dt = DataType.model_validate("STRING(medium)")
    assert dt.key == "STRING"
    assert dt.length == "medium"


def test_datatype_nested_array_element():
    dt = DataType.model_validate("ARRAY(STRING(20))")
    assert dt.key == "ARRAY"
    assert isinstance(dt.type, DataType)
    assert dt.type.key == "STRING"
    assert dt.type.length == 20


def test_datatype_key_is_normalized_and_none_options_become_empty():
    dt = DataType.model_validate({"key": " uuid ", "options": None})
    assert dt.key == "UUID"
    assert dt.options == {}
    assert dt.length is None


def test_datatype_blank_key_is_none():
    assert DataType.model_validate({"key": "   "}).key is None


def test_datatype_accepts_camel_case_aliases():
    dt = DataType.model_validate({"key": "INTEGER", "allowNull": True})
    assert dt.allow_null is True
    dt2 = DataType.model_validate({"key": "VIRTUAL", "returnType": "STRING"})
    assert dt2.return_type.key == "STRING"


def test_datatype_is_frozen():
    dt = DataType(key="STRING")
    with pytest.raises(ValidationError):
        dt.key = "TEXT"  # type: ignore[misc]


# --- Attribute --- #

def test_attribute_bare_type_shorthand():
    att = Attribute.model_validate("BIGINT")
    assert att.type_key == "BIGINT"
    assert att.allow_null is None


def test_attribute_aliases_and_tristate_nullability():
    assert Attribute.model_validate({"type": "STRING", "allowNull": False}).allow_null is False
    assert Attribute.model_validate({"type": "STRING", "allow_null": True}).allow_null is True
    assert Attribute.model_validate({"type": "STRING"}).allow_null is None


def test_attribute_rejects_non_boolean_nullability():
    with pytest.raises(ValidationError):
        Attribute.model_validate({"type": "STRING", "allowNull": "perhaps"})


def test_attribute_without_type():
    att = Attribute.model_validate({})
    assert att.type is None
    assert att.type_key is None


def test_attribute_extra_keys_are_kept():
    att = Attribute.model_validate({"type": "STRING", "comment": "display name"})
    assert att.model_extra == {"comment": "display name"}


# --- Enum values --- #

def test_enum_values_prefer_attribute_values_and_copy():
    source = ["a", "b"]
    att = Attribute.model_validate({"type": {"key": "ENUM", "values": ["x"]}, "values": source})
    values = att.enum_values
    assert values == ["a", "b"]
    values.append("c")
    assert att.enum_values == ["a", "b"]


def test_enum_values_fall_back_to_type_values_then_empty():
    assert Attribute.model_validate({"type": {"key": "ENUM", "values": ["x", "y"]}}).enum_values == ["x", "y"]
    assert Attribute.model_validate({"type": "ENUM"}).enum_values == []


# --- Computed (virtual) type --- #

def test_computed_type_from_attribute_or_declared_type():
    att = Attribute.model_validate({"type": "VIRTUAL", "returnType": "INTEGER"})
    assert att.computed_type.key == "INTEGER"

    att2 = Attribute.model_validate({"type": "VIRTUAL(DATE)"})
    assert att2.computed_type.key == "DATE"

    assert Attribute.model_validate({"type": "VIRTUAL"}).computed_type is None
    assert Attribute.model_validate({}).computed_type is None
