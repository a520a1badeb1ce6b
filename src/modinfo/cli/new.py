#!/usr/bin/env python3
from pathlib import Path

from modinfo.cli.common import save_or_report
from modinfo.core.app_context import AppContext
from modinfo.core.constants import MODINFO_FILENAME
from modinfo.core.fields import FieldKey, ModinfoFormat
from modinfo.core.modinfo import Modinfo
from modinfo.core.utils import to_title_case


def register(subparsers):
    sp = subparsers.add_parser("new", help="Create a new ModInfo.xml")
    sp.add_argument("path", help="File to create (a folder gets ModInfo.xml inside it)")
    sp.add_argument("--name", required=True, help="Internal modlet name")
    sp.add_argument("--author", required=True)
    sp.add_argument("--description", required=True)
    sp.add_argument("--display-name", default=None, help="Defaults to the title-cased name")
    sp.add_argument("--version", default="0.1.0")
    sp.add_argument("--compat", default=None, help="Game compatibility tag (e.g. 'A21')")
    sp.add_argument("--website", default=None)
    sp.add_argument("--format", choices=[f.value for f in ModinfoFormat], default=None,
                    help="Layout (default from config 'default_format')")
    sp.add_argument("--force", action="store_true", help="Overwrite an existing file")
    sp.set_defaults(func=new)


def build_modinfo(args, ctx: AppContext) -> Modinfo:
    modinfo = Modinfo.new()
    modinfo.set_value_for(FieldKey.NAME, args.name)
    # same default the reader applies when DisplayName is absent
    modinfo.set_value_for(FieldKey.DISPLAY_NAME, args.display_name or to_title_case(args.name))
    modinfo.set_value_for(FieldKey.AUTHOR, args.author)
    modinfo.set_value_for(FieldKey.DESCRIPTION, args.description)
    modinfo.set_version(args.version)
    if args.compat is not None:
        modinfo.set_value_for(FieldKey.COMPAT, args.compat)
    if args.website is not None:
        modinfo.set_value_for(FieldKey.WEBSITE, args.website)
    modinfo.set_modinfo_version(args.format or ctx.default_format)
    return modinfo


def new(args, ctx: AppContext) -> int:
    target = Path(args.path)
    if target.is_dir():
        target = target / MODINFO_FILENAME
    if target.exists() and not args.force:
        print(f"{target} already exists (use --force to overwrite)")
        return 1

    modinfo = build_modinfo(args, ctx)
    modinfo.set_file_path(target)
    rc = save_or_report(modinfo)
    if rc == 0:
        print(f"Created {target} ({modinfo.get_modinfo_version().value} layout)")
    return rc
