#!/usr/bin/env python3
"""
Purpose:
    Field vocabulary and small value models shared by the Modinfo model, the
    reader and the writer: layout enum, field keys with their XML tag names,
    the version field (version + compat tag) and file metadata.
"""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Dict, Final, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from modinfo.core.constants import CURRENT_ROOT_TAG, LEGACY_ROOT_TAG
from modinfo.core.utils import to_pascal_case
from modinfo.core.version import Version


class ModinfoFormat(str, Enum):
    """
    Layout of a ModInfo.xml file.

    LEGACY:
        ``<ModInfo>`` root; Name, Version, Description, Author.
    CURRENT:
        XML declaration and ``<xml>`` root; adds DisplayName and Website.
    """
    LEGACY = "legacy"
    CURRENT = "current"

    @property
    def root_tag(self) -> str:
        return CURRENT_ROOT_TAG if self is ModinfoFormat.CURRENT else LEGACY_ROOT_TAG

    @classmethod
    def from_root_tag(cls, tag: str) -> "ModinfoFormat":
        # anything that is not the generic "xml" root is treated as legacy
        return cls.CURRENT if tag == CURRENT_ROOT_TAG else cls.LEGACY


class FieldKey(str, Enum):
    """Named slots of a ModInfo document."""
    NAME = "name"
    DISPLAY_NAME = "display_name"
    VERSION = "version"
    DESCRIPTION = "description"
    AUTHOR = "author"
    WEBSITE = "website"
    COMPAT = "compat"

    @property
    def tag(self) -> str:
        """XML element name ('display_name' -> 'DisplayName')."""
        return to_pascal_case(self.value)

    @classmethod
    def lookup(cls, name: str) -> Optional["FieldKey"]:
        """Case-insensitive lookup; None for unknown names."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None


# Serialization order of the data elements
FIELD_ORDER: Final[Tuple[FieldKey, ...]] = (
    FieldKey.NAME,
    FieldKey.DISPLAY_NAME,
    FieldKey.VERSION,
    FieldKey.DESCRIPTION,
    FieldKey.AUTHOR,
    FieldKey.WEBSITE,
)

# Fields that exist in the legacy layout
LEGACY_FIELDS: Final[Tuple[FieldKey, ...]] = tuple(
    k for k in FIELD_ORDER if k not in (FieldKey.DISPLAY_NAME, FieldKey.WEBSITE)
)

# Plain string slots served by get_value_for/set_value_for
TEXT_FIELDS: Final[Tuple[FieldKey, ...]] = (
    FieldKey.AUTHOR,
    FieldKey.DESCRIPTION,
    FieldKey.DISPLAY_NAME,
    FieldKey.NAME,
    FieldKey.WEBSITE,
)

# Element tag -> field, for the reader's dispatch
TAG_TO_FIELD: Final[Dict[str, FieldKey]] = {k.tag: k for k in FIELD_ORDER}


def fields_for(fmt: ModinfoFormat) -> Tuple[FieldKey, ...]:
    return FIELD_ORDER if fmt is ModinfoFormat.CURRENT else LEGACY_FIELDS


class VersionField(BaseModel):
    """The modlet version plus the optional game compatibility tag."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    value: Version = Field(default_factory=Version.default, description="Modlet version.")
    compat: Optional[str] = Field(default=None, description="Free-text game compatibility tag (e.g. 'A21').")

    def __str__(self) -> str:
        if self.compat:
            return f"{self.value} ({self.compat})"
        return str(self.value)


class ModinfoMeta(BaseModel):
    """Bookkeeping that is not part of the document content."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    format_version: ModinfoFormat = Field(default=ModinfoFormat.CURRENT, description="Layout used when rendering.")
    path: Optional[Path] = Field(default=None, description="File the model was read from / is written to.")
