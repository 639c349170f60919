#!/usr/bin/env python3
"""
Purpose:
    Wires together the ModelSchema application context by merging configuration,
    initializing the model registry, and selecting the type registry.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, Optional

from modelschema.core.attribute.registry import DEFAULT_REGISTRY, TypeRegistry
from modelschema.core.config import load_config
from modelschema.core.model.registry import ModelRegistry


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and registries."""
    config: Dict[str, Any]
    models: ModelRegistry
    types: TypeRegistry


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    model_roots: Optional[Iterable[Path]] = None,
    types: Optional[TypeRegistry] = None,
    preload: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        model_roots:
            Optional override for model search paths. Defaults to `config['model_paths']`.
        types:
            Type registry for schema generation. Defaults to `DEFAULT_REGISTRY`.
        preload:
            If True, eagerly loads the model registry; otherwise, caller may load later.
    """
    cfg = config or load_config()

    model_paths = [Path(p) for p in (model_roots or cfg.get("model_paths", []))]
    model_registry = ModelRegistry(model_paths)

    if preload:
        model_registry.load(clear=True)

    return AppContext(config=cfg, models=model_registry, types=types or DEFAULT_REGISTRY)
