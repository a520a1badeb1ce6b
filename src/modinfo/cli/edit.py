#!/usr/bin/env python3
"""
Commands that modify an existing ModInfo.xml: bump, set and convert.
"""
import sys

from modinfo.cli.common import load_or_report, save_or_report
from modinfo.core.app_context import AppContext
from modinfo.core.errors import InvalidVersion
from modinfo.core.fields import FieldKey, ModinfoFormat
from modinfo.core.utils import to_title_case


def register(subparsers):
    bp = subparsers.add_parser("bump", help="Bump the modlet version")
    bp.add_argument("path", help="ModInfo.xml file or modlet folder")
    bp.add_argument("part", choices=["major", "minor", "patch"], help="Version component to bump")
    bp.add_argument("--pre", default=None, help="Prerelease to set after bumping (e.g. 'rc.1')")
    bp.add_argument("--build", default=None, help="Build metadata to set after bumping")
    bp.add_argument("--dry-run", action="store_true", help="Print the new version without writing")
    bp.set_defaults(func=bump)

    sp = subparsers.add_parser("set", help="Set a field value")
    sp.add_argument("path", help="ModInfo.xml file or modlet folder")
    sp.add_argument("field", choices=[k.value for k in FieldKey], type=str.lower, help="Field name")
    sp.add_argument("value", help="New value")
    sp.set_defaults(func=set_field)

    cp = subparsers.add_parser("convert", help="Rewrite a file in another layout")
    cp.add_argument("path", help="ModInfo.xml file or modlet folder")
    cp.add_argument("--to", required=True, choices=[f.value for f in ModinfoFormat], help="Target layout")
    cp.add_argument("-o", "--output", default=None, help="Write here instead of in place")
    cp.set_defaults(func=convert)


def bump(args, ctx: AppContext) -> int:
    modinfo = load_or_report(args.path)
    if modinfo is None:
        return 1

    old = str(modinfo.get_version())
    getattr(modinfo, f"bump_version_{args.part}")()
    try:
        if args.pre is not None:
            modinfo.set_version_prerelease(args.pre)
        if args.build is not None:
            modinfo.set_version_build(args.build)
    except InvalidVersion as e:
        print(str(e), file=sys.stderr)
        return 1

    print(f"{old} -> {modinfo.get_version()}")
    if args.dry_run:
        return 0
    return save_or_report(modinfo)


def set_field(args, ctx: AppContext) -> int:
    modinfo = load_or_report(args.path)
    if modinfo is None:
        return 1
    modinfo.set_value_for(args.field, args.value)
    return save_or_report(modinfo)


def convert(args, ctx: AppContext) -> int:
    modinfo = load_or_report(args.path)
    if modinfo is None:
        return 1

    target = ModinfoFormat(args.to)
    if target is ModinfoFormat.LEGACY:
        dropped = _legacy_dropped_fields(modinfo)
        if dropped:
            print(f"Note: {', '.join(dropped)} not part of the legacy layout and will be dropped.")
    modinfo.set_modinfo_version(target)
    return save_or_report(modinfo, args.output)


def _legacy_dropped_fields(modinfo) -> list:
    # a display name equal to the one derived from Name is recreated on read
    dropped = []
    derived = to_title_case(modinfo.name) if modinfo.name else None
    if modinfo.display_name and modinfo.display_name != derived:
        dropped.append(FieldKey.DISPLAY_NAME.tag)
    if modinfo.website:
        dropped.append(FieldKey.WEBSITE.tag)
    return dropped
