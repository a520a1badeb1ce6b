#!/usr/bin/env python3
import json
from pathlib import Path

from modinfo.core import config as config_module
from modinfo.core.app_context import AppContext


def register(subparsers):
    sp = subparsers.add_parser("config", help="Config utilities")
    sps = sp.add_subparsers(dest="config_cmd")

    def config_default(args, ctx: AppContext) -> int:
        sp.print_help()
        return 1
    sp.set_defaults(func=config_default)

    showp = sps.add_parser("show", help="Show effective config")
    showp.set_defaults(func=show_config)

    pathsp = sps.add_parser("paths", help="List config files in precedence order")
    pathsp.set_defaults(func=show_paths)


def show_config(args, ctx: AppContext) -> int:
    print(json.dumps(ctx.config, indent=2))
    return 0


def show_paths(args, ctx: AppContext) -> int:
    paths = [config_module.GLOBAL_CONFIG_PATH, Path.cwd() / config_module.PROJECT_CONFIG_NAME]
    for p in paths:
        status = "found" if p.exists() else "missing"
        print(f"{p} ({status})")
    return 0
