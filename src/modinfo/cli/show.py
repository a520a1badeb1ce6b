#!/usr/bin/env python3
import json
from typing import Any, Dict

import yaml

from modinfo.cli.common import load_or_report
from modinfo.core.app_context import AppContext
from modinfo.core.fields import FieldKey
from modinfo.core.modinfo import Modinfo


def register(subparsers):
    sp = subparsers.add_parser("show", help="Show the fields of a ModInfo.xml file")
    sp.add_argument("path", help="ModInfo.xml file or modlet folder")
    sp.add_argument("--json", action="store_true", help="JSON output instead of YAML")
    sp.add_argument("--xml", action="store_true", help="Print the re-rendered XML")
    sp.set_defaults(func=show)


def summarize(modinfo: Modinfo) -> Dict[str, Any]:
    """Plain dict view of a model, in document order."""
    return {
        "format": modinfo.get_modinfo_version().value,
        "path": str(modinfo.get_file_path()) if modinfo.get_file_path() else None,
        FieldKey.NAME.value: modinfo.name,
        FieldKey.DISPLAY_NAME.value: modinfo.display_name,
        FieldKey.VERSION.value: str(modinfo.get_version()),
        FieldKey.COMPAT.value: modinfo.version.compat,
        FieldKey.DESCRIPTION.value: modinfo.description,
        FieldKey.AUTHOR.value: modinfo.author,
        FieldKey.WEBSITE.value: modinfo.website,
    }


def show(args, ctx: AppContext) -> int:
    modinfo = load_or_report(args.path)
    if modinfo is None:
        return 1

    if args.xml:
        print(modinfo.to_string(), end="")
    elif args.json:
        print(json.dumps(summarize(modinfo), indent=2))
    else:
        print(yaml.safe_dump(summarize(modinfo), sort_keys=False, allow_unicode=True), end="")
    return 0
