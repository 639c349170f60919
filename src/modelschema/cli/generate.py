#!/usr/bin/env python3

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from pydantic import ValidationError

from modelschema.core.app_context import AppContext
from modelschema.core.builder import build_schema
from modelschema.core.constants import DEFAULT_TEXT_ENCODING
from modelschema.core.formatting import dump_schema, format_pydantic_errors_simple
from modelschema.core.model.model_definition import ModelDefinition
from modelschema.core.utils import split_csv


def register(subparsers):
    parser = subparsers.add_parser(
        "generate",
        help="Generate a JSON-Schema-like descriptor from a model definition."
    )
    parser.add_argument("model", help="Model name (preferred) or path to a model definition file.")
    parser.add_argument("--attributes", help="Comma-separated allow-list of attribute names (in output order).")
    parser.add_argument("--exclude", help="Comma-separated attribute names to leave out.")
    parser.add_argument("--private", help="Comma-separated attribute names to leave out (ignored if --exclude is given).")
    parser.add_argument("--always-required", action="store_true", help="Mark every included attribute as required.")
    parser.add_argument("--format", choices=["json", "yaml"], help="Output format (default from config).")
    parser.add_argument("--output", "-o", help="Write to this file instead of stdout.")
    parser.set_defaults(func=generate)


def generate(args, ctx: AppContext) -> int:
    """
    Build the schema for a model (by registry name or file path) and print or write it.
    """
    model, error = _load_model(args.model, ctx)
    if error:
        print(error)
        return 1

    try:
        schema = build_schema(model, _options_from_args(args, ctx.config), registry=ctx.types)
    except ValidationError as e:
        print("Invalid options or attribute metadata:")
        for line in format_pydantic_errors_simple(e):
            print(f"  - {line}")
        return 1

    output_cfg = ctx.config.get("output", {})
    fmt = args.format or output_cfg.get("format", "json")
    try:
        text = dump_schema(schema, fmt=fmt, indent=int(output_cfg.get("indent", 2)))
    except ValueError as e:
        print(e)
        return 1

    if not args.output:
        print(text)
        return 0

    output_path = Path(args.output).resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text if text.endswith("\n") else text + "\n", encoding=DEFAULT_TEXT_ENCODING)
    print(f"Schema written to {output_path}")
    return 0


# --- Helpers --- #

def _load_model(target: str, ctx: AppContext) -> Tuple[Optional[ModelDefinition], Optional[str]]:
    """Resolve `target` by registry name first, then as a file path."""
    model = ctx.models.get(target)
    if model is not None:
        return model, None

    p = Path(target)
    if not p.exists():
        return None, f"Model '{target}' not found by name or path."
    try:
        return ModelDefinition.from_file(p), None
    except ValidationError as e:
        lines = "\n".join(f"  - {m}" for m in format_pydantic_errors_simple(e))
        return None, f"Model file invalid: {p}\n{lines}"
    except (OSError, ValueError) as e:
        return None, f"Model file invalid: {p}\n  - {e}"


def _options_from_args(args, config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge CLI flags over the `build` section of the config."""
    build_cfg = config.get("build", {})
    exclude = split_csv(args.exclude)
    private = split_csv(args.private)
    # Configured exclusions apply only when neither flag was given on the command line
    if exclude is None and private is None:
        exclude = list(build_cfg.get("exclude") or []) or None
    return {
        "always_required": bool(args.always_required or build_cfg.get("always_required", False)),
        "attributes": split_csv(args.attributes),
        "exclude": exclude,
        "private": private,
    }
