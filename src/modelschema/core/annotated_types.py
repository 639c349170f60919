#!/usr/bin/env python3
"""
Purpose:
    Provides reusable annotated types and normalization helpers for ModelSchema's
    Pydantic models such as model names and attribute names.
"""

from typing import Any, Annotated
from pydantic import BeforeValidator

from modelschema.core.constants import ATTRIBUTE_NAME_ALLOWED_RE, MODEL_NAME_ALLOWED_RE
from modelschema.core.utils import is_valid_attribute_name, is_valid_model_name


# --- Normalizers --- #

def _normalize_model_name(v: Any) -> str:
    """
    Normalize a model identifier:
    - coerce to str
    - strip surrounding whitespace
    - lowercase
    - validate via fullmatch against MODEL_NAME_ALLOWED_RE
    """
    text = "" if v is None else str(v).strip().lower()
    if not text:
        raise ValueError("Invalid name: must be a non-empty string")
    if not is_valid_model_name(text):
        raise ValueError(
            f"Invalid name: {text!r}. Allowed pattern: {MODEL_NAME_ALLOWED_RE.pattern!r}"
        )
    return text


def _normalize_attribute_name(v: Any) -> str:
    """
    Normalize an attribute name: strip whitespace and enforce ATTRIBUTE_NAME_ALLOWED_RE.
    Case is preserved.
    """
    text = "" if v is None else str(v).strip()
    if not text:
        raise ValueError("Attribute names must be non-empty")
    if not is_valid_attribute_name(text):
        raise ValueError(
            f"The attribute name {text!r} must match the pattern {ATTRIBUTE_NAME_ALLOWED_RE.pattern!r}"
        )
    return text


# --- Reusable Annotated types --- #

ModelName = Annotated[str, BeforeValidator(_normalize_model_name)]
AttributeName = Annotated[str, BeforeValidator(_normalize_attribute_name)]
