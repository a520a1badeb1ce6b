#!/usr/bin/env python3
"""
Exception types raised by modinfo.

Every error derives from `ModinfoError`, and most also derive from the closest
builtin so callers can catch either (`FsNotFound` is a `FileNotFoundError`,
`XmlError` a `ValueError`, ...).
"""


class ModinfoError(Exception):
    """Base class for all modinfo errors."""


class ModinfoIOError(ModinfoError, OSError):
    """A filesystem operation failed."""

    def __init__(self, message: str = "I/O error occurred"):
        super().__init__(message)


class InvalidVersion(ModinfoError, ValueError):
    """An explicitly supplied prerelease or build string violates semver grammar."""

    def __init__(self, message: str):
        super().__init__(f"Invalid version: {message}")


class FsNotFound(ModinfoError, FileNotFoundError):
    """The modinfo file to read does not exist."""

    def __init__(self, path=None):
        self.path = path
        super().__init__("File not found" if path is None else f"File not found: {str(path)!r}")


class XmlError(ModinfoError, ValueError):
    """The XML text is malformed or a recognized element lacks its `value` attribute."""

    def __init__(self, message: str):
        super().__init__(f"Could not parse XML: {message}")


class WriteError(ModinfoError):
    """No destination is available to write the modinfo file to."""

    def __init__(self, message: str = "Could not write modinfo.xml"):
        super().__init__(message)


# --- Required fields --- #

class MissingRequiredField(ModinfoError):
    """A field required by a validated read is absent or empty."""

    field: str = ""

    def __init__(self):
        super().__init__(f"No {self.field.capitalize()} found in modinfo.xml")


class NoModinfoAuthor(MissingRequiredField):
    field = "author"


class NoModinfoDescription(MissingRequiredField):
    field = "description"


class NoModinfoName(MissingRequiredField):
    field = "name"


class NoModinfoVersion(MissingRequiredField):
    field = "version"
