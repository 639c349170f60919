#!/usr/bin/env python3
"""
Core constants used across ModelSchema.

- Type handling: string length aliases and the permissive "any" type set.
- File handling: supported model-definition extensions and default text encoding.
- Regular expressions: compiled patterns used by validators and normalizers.
"""

import re
from types import MappingProxyType
from typing import Final, Mapping

# --- Schema constants --- #

# Marker appended to a fragment's type set when the attribute accepts null
NULL_TYPE: Final[str] = "null"

# Type set of the loose "any" fragment (order is part of the output contract)
ANY_TYPES: Final[tuple[str, ...]] = ("object", "array", "boolean", "number", "string")

# Storage-size length tiers resolved to literal byte-length bounds
STRING_LENGTHS: Final[Mapping[str, int]] = MappingProxyType({
    "tiny": 255,
    "medium": 16777215,
    "long": 4294967295,
})


# --- File handling --- #

# Supported model definition file extensions
SUPPORTED_MODEL_EXT: Final[frozenset[str]] = frozenset({".json", ".yml", ".yaml"})

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Matches valid attribute names: leading letter/underscore, then letters/numbers/underscores
ATTRIBUTE_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

# Allowed model names: lowercase letters, digits, dot, underscore, hyphen
MODEL_NAME_ALLOWED_RE: re.Pattern[str] = re.compile(r"^[a-z0-9._-]+$")

# Literal integer lengths in shorthand declarations, e.g. the "50" in "STRING(50)"
LENGTH_LITERAL_RE: re.Pattern[str] = re.compile(r"^\d+$")


# --- Runtime guard --- #
def validate_constants():
    """
    Ensure constants are valid at runtime.
    """
    if NULL_TYPE in ANY_TYPES:
        raise RuntimeError(f"ANY_TYPES must not contain the null marker {NULL_TYPE!r}")
    for alias, length in STRING_LENGTHS.items():
        if not isinstance(length, int) or length <= 0:
            raise RuntimeError(f"STRING_LENGTHS[{alias!r}] must be a positive int, got {length!r}")

validate_constants()
