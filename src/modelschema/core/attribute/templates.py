#!/usr/bin/env python3
"""
Purpose:
    Shared, read-only schema fragment templates for primitive types.

Templates are MappingProxyType views and cannot be mutated; transforms build
new dicts from them (`{**STRING, "format": "uuid"}`) and `any_schema()`
returns a fresh copy of the loose fallback on every call.
"""

from types import MappingProxyType
from typing import Any, Dict, Final, Mapping

from modelschema.core.constants import ANY_TYPES

ARRAY: Final[Mapping[str, Any]] = MappingProxyType({"type": "array"})
BOOLEAN: Final[Mapping[str, Any]] = MappingProxyType({"type": "boolean"})
INTEGER: Final[Mapping[str, Any]] = MappingProxyType({"type": "integer"})
NUMBER: Final[Mapping[str, Any]] = MappingProxyType({"type": "number"})
OBJECT: Final[Mapping[str, Any]] = MappingProxyType({"type": "object"})
STRING: Final[Mapping[str, Any]] = MappingProxyType({"type": "string"})

# Loose schema for JSON columns and for anything without a transform
ANY: Final[Mapping[str, Any]] = MappingProxyType({"type": ANY_TYPES})


def any_schema() -> Dict[str, Any]:
    """A new, mutable copy of the loose "any" fragment."""
    return {"type": list(ANY["type"])}
