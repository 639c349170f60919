#!/usr/bin/env python3
"""
Purpose:
    Resolves a single Attribute into a schema fragment: looks up its type in
    a TypeRegistry, falls back to the loose "any" fragment when no transform
    applies, and widens the result with "null" for nullable attributes.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

from modelschema.core.attribute.attribute import Attribute
from modelschema.core.attribute.registry import DEFAULT_REGISTRY, TypeRegistry
from modelschema.core.attribute.templates import any_schema
from modelschema.core.constants import NULL_TYPE

logger = logging.getLogger(__name__)


# --- Public API --- #

def resolve_attribute(attribute: Optional[Attribute], registry: TypeRegistry = DEFAULT_REGISTRY) -> Dict[str, Any]:
    """
    Produce the schema fragment for one attribute.

    Behavior:
        - Unknown or missing type information never raises; it yields
          `{"type": ["object", "array", "boolean", "number", "string"]}`.
        - ARRAY and VIRTUAL transforms recurse through this function with
          the same registry.
        - Nullability is applied exactly once, to the outermost fragment.

    Example:
        >>> resolve_attribute(Attribute.model_validate({"type": "STRING(tiny)", "allowNull": True}))
        {'type': ['string', 'null'], 'maxLength': 255}
    """
    schema = _transform(attribute, registry)
    return expand_nullable(schema, attribute.allow_null if attribute is not None else None)


def expand_nullable(fragment: Mapping[str, Any], allow_null: Optional[bool]) -> Dict[str, Any]:
    """
    Widen `fragment["type"]` with the null marker when `allow_null` is True.

    The input is never modified: a copy with a new type list is returned.
    Any value other than an explicit True leaves the fragment as-is.
    """
    if allow_null is not True:
        return fragment if isinstance(fragment, dict) else dict(fragment)

    schema = dict(fragment)
    current = schema.get("type")
    types = list(current) if isinstance(current, (list, tuple)) else [current]
    types.append(NULL_TYPE)
    schema["type"] = types
    return schema


# --- Internals --- #

def _transform(attribute: Optional[Attribute], registry: TypeRegistry) -> Dict[str, Any]:
    """Run the registered transform, or return a fresh "any" fragment."""
    key = attribute.type_key if attribute is not None else None
    transform = registry.get(key)
    if transform is None:
        logger.debug("No transform for type key %r; using loose schema", key)
        return any_schema()

    schema = transform(attribute, lambda inner: resolve_attribute(inner, registry))
    if not schema:
        logger.debug("Transform for %r produced no schema; using loose schema", key)
        return any_schema()
    return schema
