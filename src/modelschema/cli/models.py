#!/usr/bin/env python3

import json
from typing import Optional

from modelschema.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("models", help="Model definition utilities")
    sps = sp.add_subparsers(dest="models_cmd")

    # default when user runs: `modelschema models`
    def models_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=models_default)

    lp = sps.add_parser("list", help="List model definitions")
    lp.add_argument("--all", action="store_true", help="Include invalid model files")
    lp.add_argument("--invalid", action="store_true", help="Show only invalid model files")
    lp.add_argument("--json", action="store_true", help="JSON output")
    lp.set_defaults(func=list_models)

    ssp = sps.add_parser("show", help="Show a model definition")
    ssp.add_argument("model", help="Model name")
    ssp.set_defaults(func=show_model)


def list_models(args, ctx: AppContext) -> int:
    print("Searched model_paths:", ", ".join(ctx.config.get("model_paths", [])) or "<none>")

    entries = _select_entries(args, ctx)

    if args.json:
        return _print_entries_json(entries)

    if not entries:
        print("No models found.")
        return 1

    print("\nModels Found:")
    for e in _sorted_entries(entries):
        print(_format_entry_line(e))
    return 0


def show_model(args, ctx: AppContext) -> int:
    try:
        m = ctx.models.require(args.model)
    except LookupError as e:
        print(e)
        return 1
    print(json.dumps(m.model_dump(mode="json", by_alias=True, exclude_none=True), indent=2))
    return 0


# --- Internal helpers --- #

def _select_entries(args, ctx: AppContext):
    if getattr(args, "invalid", False):
        return ctx.models.invalid_entries()
    if getattr(args, "all", False):
        return ctx.models.entries()
    return ctx.models.valid_entries()


def _sorted_entries(entries):
    def display_name(e):
        return (e.name or e.path.stem).lower()
    # valid first (False < True), then by display name
    return sorted(entries, key=lambda x: (not x.valid, display_name(x)))


def _brief_reason(reason: Optional[str]) -> str:
    if not reason:
        return "unknown"
    return reason.splitlines()[0]


def _format_entry_line(e) -> str:
    status = "✓ valid" if e.valid else f"✗ invalid ({_brief_reason(e.reason)})"
    return f"  - {e.name:24} {status:35}  {e.path}"


def _print_entries_json(entries) -> int:
    payload = [{
        "name": e.name,
        "valid": e.valid,
        "path": str(e.path),
        "reason": e.reason,
    } for e in entries]
    print(json.dumps(payload, indent=2))
    return 0 if payload else 1
