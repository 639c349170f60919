#!/usr/bin/env python3
"""
Purpose:
    Implements the TypeRegistry, an immutable mapping from canonical type key
    to the transform that turns an Attribute of that type into a schema
    fragment, together with the default set of transforms.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from modelschema.core.attribute.attribute import Attribute
from modelschema.core.attribute.templates import BOOLEAN, INTEGER, NUMBER, STRING, any_schema
from modelschema.core.attribute.type_key import TypeKey
from modelschema.core.constants import LENGTH_LITERAL_RE, STRING_LENGTHS

logger = logging.getLogger(__name__)

# Re-enters attribute resolution for composite types (array elements, virtual return types)
Resolve = Callable[[Attribute], Dict[str, Any]]

# A transform returns a new fragment, or None to request the "any" fallback
Transform = Callable[[Attribute, Resolve], Optional[Dict[str, Any]]]


# --- Transforms --- #

def _bigint(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**INTEGER, "format": "int64"}


def _integer(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**INTEGER, "format": "int32"}


def _plain_integer(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**INTEGER}


def _plain_number(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**NUMBER}


def _float(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**NUMBER, "format": "float"}


def _double(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**NUMBER, "format": "double"}


def _boolean(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**BOOLEAN}


def _plain_string(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**STRING}


def _string(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    """String with `maxLength` when the `length` option resolves to a bound."""
    schema = {**STRING}
    length = resolve_string_length(att.type.length if att.type is not None else None)
    if length:
        schema["maxLength"] = length
    return schema


def _date(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**STRING, "format": "date-time"}


def _dateonly(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**STRING, "format": "date"}


def _time(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**STRING, "format": "time"}


def _blob(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**STRING, "contentEncoding": "base64"}


def _inet(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {"type": [{**STRING, "format": "ipv4"}, {**STRING, "format": "ipv6"}]}


def _uuid(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {**STRING, "format": "uuid"}


def _json(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return any_schema()


def _enum(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    return {"type": "enum", "values": att.enum_values}


def _array(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    element = att.type.type if att.type is not None else None
    item = Attribute(type=element, allow_null=element.allow_null if element is not None else None)
    return {"type": "array", "items": resolve(item)}


def _virtual(att: Attribute, resolve: Resolve) -> Dict[str, Any]:
    # Nullability of the virtual attribute itself is applied by the caller
    return resolve(Attribute(type=att.computed_type))


# --- Helpers --- #

def resolve_string_length(length: Any) -> Optional[int]:
    """
    Resolve a string `length` option to a literal bound.

    - size aliases (case-insensitive): tiny -> 255, medium -> 16777215, long -> 4294967295
    - positive integers (or digit strings) are used as-is
    - anything else (None, 0, unknown alias, bool) -> None

    >>> resolve_string_length("tiny")
    255
    >>> resolve_string_length(50)
    50
    >>> resolve_string_length(None) is None
    True
    """
    if isinstance(length, bool) or length is None:
        return None
    if isinstance(length, str):
        text = length.strip()
        alias = STRING_LENGTHS.get(text.lower())
        if alias is not None:
            return alias
        if LENGTH_LITERAL_RE.fullmatch(text):
            length = int(text)
        else:
            logger.debug("Ignoring unrecognized string length option %r", length)
            return None
    if isinstance(length, int) and length > 0:
        return length
    return None


def _normalize_registry_key(key: Union[TypeKey, str]) -> str:
    # Raw keys with odd case or spacing still match their canonical entry
    return key.value if isinstance(key, TypeKey) else TypeKey.normalize(key)


# --- Registry --- #

class TypeRegistry:
    """
    Immutable lookup from canonical type key to transform.

    Keys are stored normalized (trimmed, uppercased) so lookups accept
    `TypeKey` members and raw strings alike. `extend` derives a new registry;
    an existing registry never changes.
    """

    def __init__(self, transforms: Mapping[Union[TypeKey, str], Transform]):
        self._transforms: Mapping[str, Transform] = MappingProxyType(
            {_normalize_registry_key(k): fn for k, fn in transforms.items()}
        )

    # --- Query API --- #

    def get(self, key: Union[TypeKey, str, None]) -> Optional[Transform]:
        """Return the transform for `key`, or None when the key is absent or unknown."""
        if key is None:
            return None
        return self._transforms.get(_normalize_registry_key(key))

    def keys(self) -> List[str]:
        """Sorted registered keys."""
        return sorted(self._transforms.keys())

    def extend(self, overrides: Mapping[Union[TypeKey, str], Transform]) -> TypeRegistry:
        """Return a new registry with `overrides` added on top of this one."""
        merged: Dict[Union[TypeKey, str], Transform] = dict(self._transforms)
        for k, fn in overrides.items():
            merged[_normalize_registry_key(k)] = fn
        return TypeRegistry(merged)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return _normalize_registry_key(key) in self._transforms

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._transforms)

    def __repr__(self) -> str:
        return f"<TypeRegistry keys={len(self)}>"


# --- Defaults --- #

DEFAULT_TRANSFORMS: Mapping[TypeKey, Transform] = MappingProxyType({
    TypeKey.ARRAY: _array,
    TypeKey.BIGINT: _bigint,
    TypeKey.BLOB: _blob,
    TypeKey.BOOLEAN: _boolean,
    TypeKey.CHAR: _plain_string,
    TypeKey.CIDR: _plain_string,
    TypeKey.CITEXT: _string,
    TypeKey.DATE: _date,
    TypeKey.DATEONLY: _dateonly,
    TypeKey.DECIMAL: _plain_number,
    TypeKey.DOUBLE_PRECISION: _double,
    TypeKey.ENUM: _enum,
    TypeKey.FLOAT: _float,
    TypeKey.INET: _inet,
    TypeKey.INTEGER: _integer,
    TypeKey.JSON: _json,
    TypeKey.JSONB: _json,
    TypeKey.MACADDR: _plain_string,
    TypeKey.MEDIUMINT: _plain_integer,
    TypeKey.NUMBER: _plain_number,
    TypeKey.REAL: _plain_number,
    TypeKey.SMALLINT: _plain_integer,
    TypeKey.STRING: _string,
    TypeKey.TEXT: _string,
    TypeKey.TIME: _time,
    TypeKey.TINYINT: _plain_number,
    TypeKey.UUID: _uuid,
    TypeKey.UUIDV1: _uuid,
    TypeKey.UUIDV4: _uuid,
    TypeKey.VIRTUAL: _virtual,
})

DEFAULT_REGISTRY: TypeRegistry = TypeRegistry(DEFAULT_TRANSFORMS)
