#!/usr/bin/env python3
"""
Read and write '7 Days to Die' ModInfo.xml files.

    >>> from modinfo import Modinfo, ModinfoFormat
    >>> info = Modinfo.from_file("ModInfo.xml")
    >>> info.bump_version_minor()
    >>> info.set_modinfo_version(ModinfoFormat.LEGACY)
    >>> info.write()
"""

from modinfo.core.errors import (
    FsNotFound,
    InvalidVersion,
    MissingRequiredField,
    ModinfoError,
    ModinfoIOError,
    NoModinfoAuthor,
    NoModinfoDescription,
    NoModinfoName,
    NoModinfoVersion,
    WriteError,
    XmlError,
)
from modinfo.core.fields import FieldKey, ModinfoFormat, ModinfoMeta, VersionField
from modinfo.core.modinfo import Modinfo, parse_validated
from modinfo.core.version import Version, parse_version
from modinfo.core.writer import render_modinfo

__version__ = "0.2.0"

__all__ = [
    "FieldKey",
    "FsNotFound",
    "InvalidVersion",
    "MissingRequiredField",
    "Modinfo",
    "ModinfoError",
    "ModinfoFormat",
    "ModinfoIOError",
    "ModinfoMeta",
    "NoModinfoAuthor",
    "NoModinfoDescription",
    "NoModinfoName",
    "NoModinfoVersion",
    "Version",
    "VersionField",
    "WriteError",
    "XmlError",
    "parse_validated",
    "parse_version",
    "render_modinfo",
]
