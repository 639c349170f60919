#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as name validation, dictionary
    merge, list parsing and file I/O helpers for ModelSchema.
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional

import yaml

from modelschema.core.constants import (
    ATTRIBUTE_NAME_ALLOWED_RE, MODEL_NAME_ALLOWED_RE, DEFAULT_TEXT_ENCODING
)


# --- Validation Helpers --- #

def is_valid_attribute_name(name: str) -> bool:
    """Return True if the attribute name fully matches the allowed pattern."""
    return bool(ATTRIBUTE_NAME_ALLOWED_RE.fullmatch(name))


def is_valid_model_name(name: str) -> bool:
    """Return True if the (lowercased) model name fully matches the allowed pattern."""
    return bool(MODEL_NAME_ALLOWED_RE.fullmatch(name))


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


def split_csv(value: Optional[str]) -> Optional[List[str]]:
    """
    Split a comma-separated CLI value into trimmed, non-empty names.

    None stays None so callers can tell "not given" from "given but empty".

    Examples:
        "a, b,,c" -> ["a", "b", "c"]
        ""        -> []
    """
    if value is None:
        return None
    return [p.strip() for p in value.split(",") if p.strip()]


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e


def load_mapping_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON or YAML file into a dict, picking the parser by suffix.

    Raises:
        ValueError: if the content cannot be parsed or is not a mapping.
    """
    text = path.read_text(encoding=DEFAULT_TEXT_ENCODING)
    if path.suffix.lower() == ".json":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(
                f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
            ) from e
    else:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {str(path)!r}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top level of {str(path)!r}, got {type(data).__name__}")
    return data
