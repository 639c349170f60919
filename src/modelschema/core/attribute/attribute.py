#!/usr/bin/env python3
"""
Purpose:
    Defines the read-only Attribute and DataType models describing a model's
    column metadata, including normalization of shorthand type declarations
    such as "STRING(50)" or "ARRAY(INTEGER)".
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from modelschema.core.attribute.type_key import TypeKey
from modelschema.core.constants import LENGTH_LITERAL_RE


# --- Models --- #

class DataType(BaseModel):
    """
    A column type descriptor.

    Fields:
      - key:        canonical uppercase type identifier ("STRING", "DOUBLE PRECISION", ...)
      - options:    type-specific options; `length` is read for string types
      - type:       element type for ARRAY
      - values:     permitted values when declared on an ENUM type
      - allow_null: element-level nullability (meaningful for ARRAY elements)
      - return_type: computed type when declared on a VIRTUAL type

    Shorthand authoring:
      "INTEGER"          -> {"key": "INTEGER"}
      "STRING(50)"       -> {"key": "STRING", "options": {"length": 50}}
      "STRING(tiny)"     -> {"key": "STRING", "options": {"length": "tiny"}}
      "ARRAY(INTEGER)"   -> {"key": "ARRAY", "type": {"key": "INTEGER"}}
      "VIRTUAL(STRING)"  -> {"key": "VIRTUAL", "return_type": {"key": "STRING"}}
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    key: Optional[str] = Field(default=None, description="Canonical type key.")
    options: Dict[str, Any] = Field(default_factory=dict, description="Type-specific options.")
    type: Optional[DataType] = Field(default=None, description="Element type (ARRAY).")
    values: Optional[List[Any]] = Field(default=None, description="Permitted values (ENUM).")
    allow_null: Optional[bool] = Field(default=None, alias="allowNull", description="Element nullability.")
    return_type: Optional[DataType] = Field(default=None, alias="returnType", description="Return type (VIRTUAL).")

    @model_validator(mode="before")
    @classmethod
    def _expand_shorthand(cls, data: Any) -> Any:
        if isinstance(data, str):
            return parse_type_shorthand(data)
        return data

    @field_validator("key", mode="before")
    @classmethod
    def _normalize_key(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        if isinstance(v, TypeKey):
            return v.value
        text = TypeKey.normalize(v)
        return text or None

    @field_validator("options", mode="before")
    @classmethod
    def _none_options_to_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def length(self) -> Any:
        """The raw `length` option (alias, integer, or None)."""
        return self.options.get("length")


class Attribute(BaseModel):
    """
    One named column of a model.

    `allow_null` is tri-state: True (nullable), False (explicitly non-null),
    None (unset). Only an explicit True widens the schema type with "null";
    only an explicit False marks the attribute as required.

    A bare type (string or DataType) is accepted in place of the mapping:
    `Attribute.model_validate("INTEGER")`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    type: Optional[DataType] = Field(default=None, description="Declared column type.")
    allow_null: Optional[bool] = Field(default=None, alias="allowNull", description="Whether null is permitted.")
    values: Optional[List[Any]] = Field(default=None, description="Permitted values (ENUM).")
    return_type: Optional[DataType] = Field(default=None, alias="returnType", description="Return type (VIRTUAL).")

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_type(cls, data: Any) -> Any:
        if isinstance(data, (str, DataType)):
            return {"type": data}
        return data

    @property
    def type_key(self) -> Optional[str]:
        """Canonical key of the declared type, if any."""
        return self.type.key if self.type is not None else None

    @property
    def enum_values(self) -> List[Any]:
        """Permitted values from the attribute, falling back to those declared on its type."""
        if self.values is not None:
            return list(self.values)
        if self.type is not None and self.type.values is not None:
            return list(self.type.values)
        return []

    @property
    def computed_type(self) -> Optional[DataType]:
        """Return type of a VIRTUAL attribute, from the attribute or its declared type."""
        if self.return_type is not None:
            return self.return_type
        return self.type.return_type if self.type is not None else None


# --- Shorthand parsing --- #

def parse_type_shorthand(text: str) -> Dict[str, Any]:
    """
    Parse a shorthand type declaration into a DataType payload.

    The parenthesised argument is an element type for ARRAY, a return type
    for VIRTUAL, and a length (integer literal or alias) for every other key.
    Unbalanced input is treated as a bare key.

    >>> parse_type_shorthand("string(50)")
    {'key': 'STRING', 'options': {'length': 50}}
    >>> parse_type_shorthand("ARRAY(STRING(20))")
    {'key': 'ARRAY', 'type': 'STRING(20)'}
    """
    raw = text.strip()
    head, inner = raw, None
    if raw.endswith(")") and "(" in raw:
        head, _, inner = raw[:-1].partition("(")

    data: Dict[str, Any] = {"key": TypeKey.normalize(head)}
    inner = (inner or "").strip()
    if not inner:
        return data

    key = TypeKey.try_parse(data["key"])
    if key is TypeKey.ARRAY:
        data["type"] = inner
    elif key is TypeKey.VIRTUAL:
        data["return_type"] = inner
    else:
        data["options"] = {"length": int(inner) if LENGTH_LITERAL_RE.fullmatch(inner) else inner}
    return data


# --- Forward-Ref Resolution --- #
DataType.model_rebuild()
Attribute.model_rebuild()
