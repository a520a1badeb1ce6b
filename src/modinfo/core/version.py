#!/usr/bin/env python3
"""
Purpose:
    Semantic version model for modlets. Provides a tolerant parser for the
    free-form version strings found in ModInfo.xml files and the bump/set
    operations used to edit them.

Parsing is lenient and never raises: text that cannot be read as a version
becomes ``0.0.0`` with the parser's error message stored as build metadata,
so the failure stays visible in the value itself. Explicit prerelease/build
assignment is strict and raises `InvalidVersion`.
"""
from __future__ import annotations

import logging
from functools import total_ordering
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from modinfo.core.constants import (
    DEFAULT_MODLET_VERSION,
    IDENTIFIER_RE,
    LENIENT_VERSION_RE,
    NUMERIC_IDENTIFIER_RE,
)
from modinfo.core.errors import InvalidVersion

log = logging.getLogger(__name__)


@total_ordering
class Version(BaseModel):
    """
    A fully formed ``major.minor.patch[-prerelease][+build]`` version.

    Example
    -------
    >>> v = parse_version("v1.2")
    >>> str(v)
    '1.2.0'
    >>> v.bump_minor(); str(v)
    '1.3.0'
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    major: int = Field(default=0, ge=0, description="Major version number.")
    minor: int = Field(default=0, ge=0, description="Minor version number.")
    patch: int = Field(default=0, ge=0, description="Patch version number.")
    prerelease: Tuple[str, ...] = Field(default=(), description="Dot-separated prerelease identifiers.")
    build: Tuple[str, ...] = Field(default=(), description="Dot-separated build metadata identifiers.")

    # --- Construction --- #

    @classmethod
    def new(cls, major: int, minor: int, patch: int) -> "Version":
        return cls(major=major, minor=minor, patch=patch)

    @classmethod
    def default(cls) -> "Version":
        """The version given to a brand new modlet (0.1.0)."""
        return cls.new(*DEFAULT_MODLET_VERSION)

    @classmethod
    def parse(cls, text: str) -> "Version":
        return parse_version(text)

    # --- Mutators --- #

    def bump_major(self) -> None:
        """Increase major by one, reset minor and patch, drop prerelease and build."""
        self._replace(major=self.major + 1, minor=0, patch=0)

    def bump_minor(self) -> None:
        """Increase minor by one, reset patch, drop prerelease and build."""
        self._replace(major=self.major, minor=self.minor + 1, patch=0)

    def bump_patch(self) -> None:
        """Increase patch by one, drop prerelease and build."""
        self._replace(major=self.major, minor=self.minor, patch=self.patch + 1)

    def set_prerelease(self, text: str) -> None:
        """
        Replace the prerelease identifiers. An empty string clears them.

        Raises:
            InvalidVersion: if `text` is not a valid semver prerelease.
        """
        self.prerelease = _split_identifiers(text, "prerelease", allow_leading_zeros=False)

    def set_build(self, text: str) -> None:
        """
        Replace the build metadata. An empty string clears it.

        Raises:
            InvalidVersion: if `text` is not valid semver build metadata.
        """
        self.build = _split_identifiers(text, "build metadata", allow_leading_zeros=True)

    def set_version(self, text: str) -> None:
        """Replace the whole value with `parse_version(text)` (never raises)."""
        parsed = parse_version(text)
        for name in ("major", "minor", "patch", "prerelease", "build"):
            setattr(self, name, getattr(parsed, name))

    def _replace(self, major: int, minor: int, patch: int) -> None:
        self.major, self.minor, self.patch = major, minor, patch
        self.prerelease = ()
        self.build = ()

    # --- Rendering & ordering --- #

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def _precedence_key(self):
        # a release sorts after all of its prereleases; build only breaks ties
        pre = (1,) if not self.prerelease else (0, *(_identifier_key(p) for p in self.prerelease))
        build = tuple(_identifier_key(b) for b in self.build)
        return (self.major, self.minor, self.patch, pre, build)


# --- Parsing --- #

def parse_version(text: Optional[str]) -> Version:
    """
    Tolerantly parse a version string.

    Accepts an optional 'v' prefix, partial versions ('1', '1.2'), prerelease
    tags with or without a separator ('1.2.3-rc.1', '1.2.3rc1') and extra
    numeric parts, which are kept as build metadata ('1.2.3.4' -> '1.2.3+4').

    Everything after '+' is build metadata, free text included, so a
    rendered fallback value parses back unchanged.

    On failure returns ``0.0.0+<error message>`` instead of raising.
    """
    try:
        return _parse_strict(text)
    except InvalidVersion as e:
        message = str(e)
        log.warning("Falling back to 0.0.0 for unparseable version %r: %s", text, message)
        return Version(build=tuple(message.split(".")))


def _parse_strict(text: Optional[str]) -> Version:
    raw = "" if text is None else str(text).strip()
    if not raw:
        raise InvalidVersion("Could not parse the major identifier: No input")

    match = LENIENT_VERSION_RE.fullmatch(raw)
    if match is None:
        raise InvalidVersion(f"Could not parse {raw!r} as a version")

    extra = tuple(p for p in match.group("extra").split(".") if p)
    prerelease = match.group("prerelease")
    build = match.group("build")
    return Version(
        major=int(match.group("major")),
        minor=int(match.group("minor") or 0),
        patch=int(match.group("patch") or 0),
        prerelease=tuple(prerelease.split(".")) if prerelease else (),
        build=extra + (tuple(build.split(".")) if build else ()),
    )


def _split_identifiers(text: str, kind: str, allow_leading_zeros: bool) -> Tuple[str, ...]:
    if text is None or text == "":
        return ()
    parts = str(text).split(".")
    for part in parts:
        if not IDENTIFIER_RE.fullmatch(part):
            raise InvalidVersion(f"{text!r} is not valid {kind}: identifiers must be non-empty [0-9A-Za-z-]")
        if not allow_leading_zeros and NUMERIC_IDENTIFIER_RE.fullmatch(part) and len(part) > 1 and part[0] == "0":
            raise InvalidVersion(f"{text!r} is not valid {kind}: numeric identifier {part!r} has a leading zero")
    return tuple(parts)


def _identifier_key(identifier: str):
    if NUMERIC_IDENTIFIER_RE.fullmatch(identifier):
        return (0, int(identifier), "")
    return (1, 0, identifier)
