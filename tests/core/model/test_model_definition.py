#!/usr/bin/env python3
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from modelschema.core.attribute.attribute import Attribute
from modelschema.core.model.model_definition import ModelDefinition


YAML_MODEL = """\
name: User
attributes:
  id: {type: INTEGER, allowNull: false}
  email: STRING(tiny)
  tags:
    type: ARRAY(STRING)
    allowNull: true
  status:
    type: ENUM
    values: [active, disabled]
"""


# --- Construction --- #

def test_from_mapping_normalizes_name_and_attributes():
    m = ModelDefinition.from_mapping(" User ", {"id": "INTEGER", "email": {"type": "STRING", "allowNull": False}})
    assert m.name == "user"
    assert m.names() == ["id", "email"]
    assert isinstance(m.get("id"), Attribute)
    assert m.get("email").allow_null is False
    assert m.get("missing") is None


@pytest.mark.parametrize("bad_name", ["", "   ", "has space", None])
def test_invalid_model_name_rejected(bad_name):
    with pytest.raises(ValidationError):
        ModelDefinition.from_mapping(bad_name, {})


@pytest.mark.parametrize("bad_attr", ["1st", "with-dash", "two words"])
def test_invalid_attribute_name_rejected(bad_attr):
    with pytest.raises(ValidationError, match="must match the pattern"):
        ModelDefinition.from_mapping("m", {bad_attr: "STRING"})


def test_unknown_top_level_keys_rejected():
    with pytest.raises(ValidationError):
        ModelDefinition.model_validate({"name": "m", "attributes": {}, "tableName": "users"})


def test_definition_is_frozen():
    m = ModelDefinition.from_mapping("m", {})
    with pytest.raises(ValidationError):
        m.name = "other"  # type: ignore[misc]


# --- File IO --- #

def test_from_yaml_file(tmp_path: Path):
    p = tmp_path / "user.yaml"
    p.write_text(YAML_MODEL, encoding="utf-8")

    m = ModelDefinition.from_file(p)

    assert m.name == "user"
    assert m.names() == ["id", "email", "tags", "status"]
    assert m.get("email").type.length == "tiny"
    assert m.get("tags").type.type.key == "STRING"
    assert m.get("status").enum_values == ["active", "disabled"]


def test_from_json_file_defaults_name_to_stem(tmp_path: Path):
    p = tmp_path / "invoice.json"
    p.write_text(json.dumps({"attributes": {"total": "DECIMAL"}}), encoding="utf-8")

    m = ModelDefinition.from_file(p)

    assert m.name == "invoice"
    assert m.get("total").type_key == "DECIMAL"


def test_from_file_missing_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError, match="does not exist"):
        ModelDefinition.from_file(tmp_path / "nope.yaml")


def test_from_file_bad_extension_raises(tmp_path: Path):
    p = tmp_path / "model.txt"
    p.write_text("name: m", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid model file extension"):
        ModelDefinition.from_file(p)


def test_from_file_invalid_attribute_raises(tmp_path: Path):
    p = tmp_path / "m.yaml"
    p.write_text("attributes:\n  id: {type: INTEGER, allowNull: maybe}\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        ModelDefinition.from_file(p)
