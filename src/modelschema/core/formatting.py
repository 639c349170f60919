#!/usr/bin/env python3
"""
Formatting helpers for ModelSchema.

- Stable, minimal one-line formatting for Pydantic v2 `ValidationError`.
- Text rendering of a built schema as JSON or YAML.
"""
from __future__ import annotations

import json
from typing import Any, Iterable, List, Mapping, Sequence

import yaml


# --- Public API --- #

def format_pydantic_errors_simple(exc: Exception) -> List[str]:
    """
    Return stable one-line messages from a Pydantic v2 ValidationError.

    Example:
        attributes.email.allowNull: Input should be a valid boolean

    Falls back to the first line of str(exc) if `exc.errors()` isn't available.
    """
    errors: Sequence[dict[str, Any]] | None = None

    if hasattr(exc, "errors") and callable(getattr(exc, "errors")):
        try:
            errors = exc.errors()  # type: ignore[assignment]
        except Exception:
            errors = None

    if not errors:
        lines = str(exc).splitlines()
        return [lines[0] if lines else type(exc).__name__]

    msgs: List[str] = []
    for err in errors:
        loc = err.get("loc", ())
        msg = err.get("msg", "Validation error")
        path = _format_error_loc(loc)
        msgs.append(f"{path}: {msg}")
    return msgs


def dump_schema(schema: Mapping[str, Any], fmt: str = "json", indent: int = 2) -> str:
    """
    Serialize a built schema to text.

    Args:
        schema: The mapping returned by `build_schema`.
        fmt: "json" or "yaml" (case-insensitive).
        indent: Indentation width.

    Raises:
        ValueError: for an unsupported format.
    """
    fmt = (fmt or "json").strip().lower()
    if fmt == "json":
        return json.dumps(schema, indent=indent)
    if fmt in {"yaml", "yml"}:
        return yaml.safe_dump(dict(schema), indent=indent, sort_keys=False, default_flow_style=False)
    raise ValueError(f"Unsupported output format {fmt!r}; expected 'json' or 'yaml'")


# --- Internals --- #

def _format_error_loc(loc: Iterable[Any]) -> str:
    """
    Convert a Pydantic error `loc` tuple into a dotted path with index suffixes.

    Examples:
        ('attributes', 'id', 'type') -> "attributes.id.type"
        (0, 'items')                 -> "[0].items"
        ()                           -> "<root>"
    """
    parts: List[str] = []
    for seg in loc:
        if isinstance(seg, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{seg}]"
            else:
                parts.append(f"[{seg}]")
        else:
            parts.append(str(seg))
    return ".".join(parts) if parts else "<root>"
