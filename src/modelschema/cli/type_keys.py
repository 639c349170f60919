#!/usr/bin/env python3
import json

from modelschema.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("types", help="List attribute type keys with a schema transform")
    sp.add_argument("--json", action="store_true", help="JSON output")
    sp.set_defaults(func=list_types)


def list_types(args, ctx: AppContext) -> int:
    keys = ctx.types.keys()
    if args.json:
        print(json.dumps(keys, indent=2))
        return 0

    print("Registered type keys (anything else resolves to the loose schema):")
    for k in keys:
        print(f"  - {k}")
    return 0
