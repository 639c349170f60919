#!/usr/bin/env python3
"""
Purpose:
    Builds an object schema for a whole model: selects and filters the
    attributes to include, resolves each one, and computes the required list.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from modelschema.core.attribute.attribute import Attribute, DataType
from modelschema.core.attribute.registry import DEFAULT_REGISTRY, TypeRegistry
from modelschema.core.attribute.resolver import resolve_attribute
from modelschema.core.model.model_definition import ModelDefinition
from modelschema.core.options import BuildOptions

logger = logging.getLogger(__name__)

# Attribute name -> Attribute (or attribute payload)
ModelLike = Union[ModelDefinition, Mapping[str, Any], None]


# --- Public API --- #

def build_schema(
    model: ModelLike,
    options: Union[BuildOptions, Mapping[str, Any], None] = None,
    *,
    registry: TypeRegistry = DEFAULT_REGISTRY,
) -> Dict[str, Any]:
    """
    Generate the object schema for `model`.

    Behavior:
        - Candidates are `options.attributes` (in that order) or every model
          attribute, minus `options.exclude` (or `options.private`).
        - Candidates the model does not define are skipped silently.
        - An attribute is required when its `allow_null` is explicitly False,
          or when `options.always_required` is set.

    Args:
        model: A `ModelDefinition` or a mapping of name -> Attribute/payload.
        options: `BuildOptions`, a plain mapping of the same keys, or None.
        registry: Type registry used to resolve attributes.

    Returns:
        {"type": "object", "properties": {...}, "required": [...]}

    Example:
        >>> build_schema({"id": {"type": "INTEGER", "allowNull": False}})
        {'type': 'object', 'properties': {'id': {'type': 'integer', 'format': 'int32'}}, 'required': ['id']}
    """
    opts = BuildOptions.coerce(options)
    attributes = _attribute_map(model)

    properties: Dict[str, Any] = {}
    required: List[str] = []

    for name in _candidate_names(attributes, opts):
        attribute = _coerce_attribute(attributes.get(name))
        if attribute is None:
            logger.debug("Skipping %r: not an attribute of the model", name)
            continue

        properties[name] = resolve_attribute(attribute, registry)
        if attribute.allow_null is False or opts.always_required:
            required.append(name)

    logger.debug("Built schema with %d properties (%d required)", len(properties), len(required))
    return {
        "type": "object",
        "properties": properties,
        "required": required,
    }


# --- Internals --- #

def _attribute_map(model: ModelLike) -> Mapping[str, Any]:
    if model is None:
        return {}
    if isinstance(model, Mapping):
        return model
    return getattr(model, "attributes", None) or {}


def _candidate_names(attributes: Mapping[str, Any], opts: BuildOptions) -> List[str]:
    """Allow-list (or all names) minus exclusions, first occurrence order, no duplicates."""
    names = opts.attributes if opts.attributes is not None else list(attributes.keys())
    excluded = set(opts.excluded)
    return [n for n in dict.fromkeys(names) if n not in excluded]


def _coerce_attribute(raw: Any) -> Optional[Attribute]:
    if raw is None or isinstance(raw, Attribute):
        return raw
    try:
        return Attribute.model_validate(raw)
    except ValidationError as e:
        logger.debug("Malformed attribute metadata %r (%d errors); keeping what validates", raw, e.error_count())
        return _salvage_attribute(raw)


def _salvage_attribute(raw: Any) -> Attribute:
    """
    Rebuild an attribute from the parts of a malformed payload that validate.

    A type descriptor that does not validate is dropped (the attribute then
    resolves to the loose "any" schema); `allowNull` is kept only when it is
    a real bool.
    """
    payload: Mapping[str, Any] = raw if isinstance(raw, Mapping) else {}
    allow_null = payload.get("allowNull", payload.get("allow_null"))
    values = payload.get("values")
    return Attribute(
        type=_try_data_type(payload.get("type")),
        allow_null=allow_null if isinstance(allow_null, bool) else None,
        values=list(values) if isinstance(values, (list, tuple)) else None,
        return_type=_try_data_type(payload.get("returnType", payload.get("return_type"))),
    )


def _try_data_type(raw: Any) -> Optional[DataType]:
    if raw is None or isinstance(raw, DataType):
        return raw
    try:
        return DataType.model_validate(raw)
    except ValidationError:
        logger.debug("Dropping unrecognized type descriptor %r", raw)
        return None
