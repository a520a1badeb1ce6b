#!/usr/bin/env python3
"""
Purpose:
    Represents a single ModInfo.xml document: the six modlet fields, the
    version/compat pair and file bookkeeping. Provides text and file round
    trips in either layout and the accessors used by tools that edit modlets.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from modinfo.core.constants import DEFAULT_TEXT_ENCODING
from modinfo.core.errors import (
    FsNotFound,
    MissingRequiredField,
    ModinfoIOError,
    NoModinfoAuthor,
    NoModinfoDescription,
    NoModinfoName,
    NoModinfoVersion,
    WriteError,
    XmlError,
)
from modinfo.core.fields import TEXT_FIELDS, FieldKey, ModinfoFormat, ModinfoMeta, VersionField
from modinfo.core.reader import read_modinfo
from modinfo.core.version import Version
from modinfo.core.writer import render_modinfo

log = logging.getLogger(__name__)

PathLike = Union[str, Path]

# Checked in this order by validate()
REQUIRED_FIELDS = (
    (FieldKey.AUTHOR, NoModinfoAuthor),
    (FieldKey.DESCRIPTION, NoModinfoDescription),
    (FieldKey.NAME, NoModinfoName),
    (FieldKey.VERSION, NoModinfoVersion),
)


class Modinfo(BaseModel):
    """
    A ModInfo.xml document.

    Typical use:
        >>> info = Modinfo.from_file("Mods/MyMod/ModInfo.xml")
        >>> info.bump_version_patch()
        >>> info.set_modinfo_version(ModinfoFormat.CURRENT)
        >>> info.write()

    `display_name` and `website` only exist in the current layout but are kept
    in memory regardless; the legacy writer leaves them out.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    author: Optional[str] = Field(default=None, description="Modlet author.")
    description: Optional[str] = Field(default=None, description="Modlet description.")
    display_name: Optional[str] = Field(default=None, description="Human-friendly name (current layout).")
    name: Optional[str] = Field(default=None, description="Internal modlet name.")
    version: VersionField = Field(default_factory=VersionField, description="Modlet version and compat tag.")
    website: Optional[str] = Field(default=None, description="Modlet website (current layout).")
    meta: ModinfoMeta = Field(default_factory=ModinfoMeta, description="Layout and file path.")

    # False when a parsed document had no Version element or a blank value
    _has_version: bool = PrivateAttr(default=True)

    # --- Construction & IO --- #

    @classmethod
    def new(cls) -> "Modinfo":
        """A model with defaults: current layout, version 0.1.0, no fields set."""
        return cls()

    @classmethod
    def from_string(cls, xml_text: str) -> "Modinfo":
        """
        Parse ModInfo.xml text, detecting the layout. Required fields are not checked.

        Raises:
            XmlError: if the XML is malformed or a known element lacks 'value'.
        """
        return read_modinfo(xml_text, cls())

    @classmethod
    def from_file(cls, path: PathLike) -> "Modinfo":
        """Read and validate a ModInfo.xml file. See `parse_validated`."""
        return parse_validated(path)

    def to_string(self) -> str:
        return render_modinfo(self)

    def __str__(self) -> str:
        return render_modinfo(self)

    def write(self, path: Optional[PathLike] = None) -> None:
        """
        Write the rendered document to `path`, or to the stored file path.

        Raises:
            WriteError: if neither `path` nor a stored file path is available.
            ModinfoIOError: if the file cannot be written.
        """
        target = Path(path) if path is not None else self.meta.path
        if target is None or str(target) == "":
            raise WriteError("Could not write modinfo.xml: no file path given or stored")
        try:
            target.write_text(render_modinfo(self), encoding=DEFAULT_TEXT_ENCODING)
        except OSError as e:
            raise ModinfoIOError(f"I/O error occurred: {e}") from e
        log.debug("Wrote %s layout to %s", self.meta.format_version.value, target)

    # --- Validation --- #

    def missing_fields(self) -> List[FieldKey]:
        """Required fields that are absent or blank, in validation order."""
        missing = []
        for key, _error in REQUIRED_FIELDS:
            if key is FieldKey.VERSION:
                present = self._has_version
            else:
                present = _is_set(self.get_value_for(key))
            if not present:
                missing.append(key)
        return missing

    def validate(self) -> None:
        """
        Raise the error for the first missing required field.

        Raises:
            NoModinfoAuthor, NoModinfoDescription, NoModinfoName, NoModinfoVersion
        """
        missing = self.missing_fields()
        if missing:
            raise dict(REQUIRED_FIELDS)[missing[0]]()

    # --- Field access --- #

    def get_value_for(self, field: Union[str, FieldKey]) -> Optional[str]:
        """
        Return the value of a text field, case-insensitively:
        author, description, display_name, name, website or compat.

        `version` is not served here (use `get_version`); unknown names give None.
        """
        key = FieldKey.lookup(field)
        if key is FieldKey.COMPAT:
            return self.version.compat
        if key in TEXT_FIELDS:
            return getattr(self, key.value)
        return None

    def set_value_for(self, field: Union[str, FieldKey], value: str) -> None:
        """
        Set a field by name, case-insensitively. `version` is parsed leniently.

        Raises:
            ValueError: if `field` is not a known field name.
        """
        key = FieldKey.lookup(field)
        if key is None:
            raise ValueError(f"Unknown modinfo field: {field!r}")
        if key is FieldKey.VERSION:
            self.set_version(value)
        elif key is FieldKey.COMPAT:
            self.version.compat = value
        else:
            setattr(self, key.value, value)

    def get_version(self) -> Version:
        """The modlet version (not the layout; see `get_modinfo_version`)."""
        return self.version.value

    def set_version(self, version: str) -> None:
        """Set the modlet version from text; unparseable text becomes 0.0.0+<error>."""
        self.version.value.set_version(version)
        self._has_version = _is_set(version)

    def get_modinfo_version(self) -> ModinfoFormat:
        """The layout used when rendering (legacy or current)."""
        return self.meta.format_version

    def set_modinfo_version(self, fmt: Union[ModinfoFormat, str]) -> None:
        self.meta.format_version = ModinfoFormat(fmt)

    def get_file_path(self) -> Optional[Path]:
        return self.meta.path

    def set_file_path(self, path: PathLike) -> None:
        self.meta.path = Path(path)

    # --- Version editing --- #

    def bump_version_major(self) -> None:
        """Increase major by one; minor and patch become 0; prerelease and build are dropped."""
        self.version.value.bump_major()

    def bump_version_minor(self) -> None:
        """Increase minor by one; patch becomes 0; prerelease and build are dropped."""
        self.version.value.bump_minor()

    def bump_version_patch(self) -> None:
        """Increase patch by one; prerelease and build are dropped."""
        self.version.value.bump_patch()

    def set_version_prerelease(self, pre: str) -> None:
        """Raises InvalidVersion on bad prerelease grammar."""
        self.version.value.set_prerelease(pre)

    def set_version_build(self, build: str) -> None:
        """Raises InvalidVersion on bad build grammar."""
        self.version.value.set_build(build)


def _is_set(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def parse_validated(path: PathLike) -> Modinfo:
    """
    Read, parse and validate a ModInfo.xml file, recording its path.

    Raises:
        FsNotFound: the file does not exist
        ModinfoIOError: the file could not be read
        XmlError: the file is not valid UTF-8 or not well-formed XML
        NoModinfoAuthor, NoModinfoDescription, NoModinfoName, NoModinfoVersion:
            a required field is missing or blank
    """
    p = Path(path)
    if not p.exists():
        raise FsNotFound(p)
    try:
        text = p.read_text(encoding=DEFAULT_TEXT_ENCODING)
    except UnicodeDecodeError as e:
        raise XmlError(f"{str(p)!r} is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ModinfoIOError(f"I/O error occurred: {e}") from e

    modinfo = Modinfo.from_string(text)
    try:
        modinfo.validate()
    except MissingRequiredField:
        log.debug("Validation failed for %s; missing: %s", p, [k.value for k in modinfo.missing_fields()])
        raise

    modinfo.meta.path = p
    return modinfo
