#!/usr/bin/env python3
"""
Core constants used across modinfo.

- Layout tokens: root element names and the XML declaration for each ModInfo.xml layout.
- Defaults: version assigned to a brand new modlet, output indentation and encoding.
- Regular expressions: compiled patterns used by the version engine.
"""

import re
from typing import Final

# --- ModInfo.xml layout tokens --- #

# Root element of the current layout (a bare, generic "xml" element)
CURRENT_ROOT_TAG: Final[str] = "xml"

# Root element of the legacy layout
LEGACY_ROOT_TAG: Final[str] = "ModInfo"

# Declaration emitted ahead of the current layout only
XML_DECLARATION: Final[str] = '<?xml version="1.0" encoding="UTF-8"?>'

# Attribute names carried by data elements
VALUE_ATTRIBUTE: Final[str] = "value"
COMPAT_ATTRIBUTE: Final[str] = "compat"

# Conventional file name for the metadata file inside a modlet folder
MODINFO_FILENAME: Final[str] = "ModInfo.xml"


# --- Defaults --- #

# Version given to a freshly created modlet
DEFAULT_MODLET_VERSION: Final[tuple[int, int, int]] = (0, 1, 0)

# Spaces per nesting level in rendered output
INDENT: Final[str] = "  "

# Default text encoding
DEFAULT_TEXT_ENCODING: Final[str] = "utf-8"


# --- Regular Expressions --- #

# Lenient version: optional v-prefix, partial numeric core, extra numeric parts,
# a prerelease with or without separator and optional build metadata.
# Any text after "+" is build metadata, which keeps fallback values re-readable.
LENIENT_VERSION_RE: re.Pattern[str] = re.compile(
    r"""
    ^[vV]?
    (?P<major>\d+)
    (?:\.(?P<minor>\d+))?
    (?:\.(?P<patch>\d+))?
    (?P<extra>(?:\.\d+)*)
    (?:[-.]?(?P<prerelease>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    (?:\+(?P<build>.+))?
    $
    """,
    re.VERBOSE,
)

# A single prerelease/build identifier
IDENTIFIER_RE: re.Pattern[str] = re.compile(r"^[0-9A-Za-z-]+$")

# Numeric identifier (used for leading-zero checks and precedence)
NUMERIC_IDENTIFIER_RE: re.Pattern[str] = re.compile(r"^\d+$")
