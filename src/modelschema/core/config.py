#!/usr/bin/env python3
"""
ModelSchema configuration loader.
"""

import os
from pathlib import Path
from typing import Any, Dict, Final, List

from modelschema.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "model_paths": [str(Path("./models").resolve())],
    "build": {"always_required": False, "exclude": []},
    "output": {"format": "json", "indent": 2},
    "logging": {"level": "INFO"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "modelschema" / "config.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load ModelSchema configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/modelschema/config.json)
        3. Project config (./modelschema.json)
        4. Environment overrides:
           - MODELSCHEMA_MODEL_PATHS (pathsep-separated list)
           - MODELSCHEMA_OUTPUT_FORMAT
           - MODELSCHEMA_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = dict(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / "modelschema.json"
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    model_paths_env = os.getenv("MODELSCHEMA_MODEL_PATHS")
    if model_paths_env:
        config["model_paths"] = _split_paths_env(model_paths_env)

    output_format_env = os.getenv("MODELSCHEMA_OUTPUT_FORMAT")
    if output_format_env:
        config = merge_dicts(config, {"output": {"format": output_format_env.strip().lower()}})

    log_level_env = os.getenv("MODELSCHEMA_LOG_LEVEL")
    if log_level_env:
        config = merge_dicts(config, {"logging": {"level": log_level_env}})

    return config


# --- Internals --- #

def _split_paths_env(value: str) -> List[str]:
    """
    Split a path-list env var on os.pathsep, trimming empties and expanding '~'.

    Example:
        "a:~/b:/tmp" on Unix  -> ["a", "/home/user/b", "/tmp"] (no resolve here)
    """
    parts = [p.strip() for p in value.split(os.pathsep)]
    return [str(Path(p).expanduser()) for p in parts if p]
