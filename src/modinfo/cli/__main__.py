#!/usr/bin/env python3

import argparse
import sys

from modinfo.core.app_context import build_context
from modinfo.cli import config, edit, new, show, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="modinfo", description="Read and edit 7 Days to Die ModInfo.xml files")
    subparsers = parser.add_subparsers(dest="command")

    # Register subcommands (they should accept ctx)
    show.register(subparsers)
    validate.register(subparsers)
    edit.register(subparsers)
    new.register(subparsers)
    config.register(subparsers)
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if hasattr(args, "func"):
        ctx = build_context()  # built once
        return args.func(args, ctx)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
