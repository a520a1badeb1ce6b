#!/usr/bin/env python3
from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from modinfo.cli.common import find_all_files
from modinfo.core.app_context import AppContext
from modinfo.core.constants import DEFAULT_TEXT_ENCODING
from modinfo.core.errors import MissingRequiredField, ModinfoError
from modinfo.core.modinfo import Modinfo


def validate_file(file_path: Path) -> Tuple[bool, str, List[str]]:
    """
    Returns: (is_valid, summary_message, error_list)
    """
    try:
        Modinfo.from_file(file_path)
    except MissingRequiredField:
        # re-read leniently to list every missing field, not only the first
        modinfo = Modinfo.from_string(file_path.read_text(encoding=DEFAULT_TEXT_ENCODING))
        errs = [f"missing required field '{k.value}'" for k in modinfo.missing_fields()]
        return False, f"{file_path}: Validation Failed", errs
    except ModinfoError as e:
        return False, f"{file_path}: Validation Failed", [str(e)]

    return True, f"{file_path}: Validation Passed", []


def validate(args, ctx: AppContext) -> int:
    files = find_all_files(args.files, recursive=args.recursive)
    if not files:
        print("No ModInfo.xml files found.")
        return 1

    success = 0
    for fp in files:
        ok, msg, errs = validate_file(fp)
        if ok:
            success += 1
            if args.verbose:
                print(msg)
            continue
        print(msg)
        for e in errs:
            print(f"  - {e}")

    total = len(files)
    print(f"Validation complete: {success}/{total} passed.")
    return 0 if success == total else 1


def register(subparser):
    parser = subparser.add_parser("validate", help="Check ModInfo.xml files for required fields.")
    parser.add_argument("files", nargs="+", help="Files or directories to validate.")
    parser.add_argument("--recursive", "-r", action="store_true", help="Recursively scan directories.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show all results, not only errors.")
    parser.set_defaults(func=validate)
