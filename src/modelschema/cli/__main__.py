#!/usr/bin/env python3

import argparse
import sys

from modelschema.core.app_context import build_context
from modelschema.core.config import load_config
from modelschema.core.logging_utils import configure_logging
from modelschema.cli import config, generate, models, type_keys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modelschema", description="ModelSchema CLI Toolkit")
    parser.add_argument("--log-level", help="Override the configured log level (e.g. DEBUG)")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    generate.register(subparsers)
    type_keys.register(subparsers)
    models.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    cfg = load_config()
    configure_logging(args.log_level or cfg.get("logging", {}).get("level"))
    ctx = build_context(config=cfg)  # built once
    return args.func(args, ctx)


if __name__ == "__main__":
    sys.exit(main())
