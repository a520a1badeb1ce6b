#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable

from modinfo.core.constants import MODINFO_FILENAME
from modinfo.core.errors import ModinfoError
from modinfo.core.modinfo import Modinfo


def resolve_modinfo_path(raw: str | Path) -> Path:
    """A modlet folder resolves to its ModInfo.xml; anything else is taken as-is."""
    p = Path(raw)
    if p.is_dir():
        return _find_in_dir(p) or p / MODINFO_FILENAME
    return p


def _find_in_dir(root: Path) -> Path | None:
    for child in root.iterdir():
        if child.is_file() and child.name.lower() == MODINFO_FILENAME.lower():
            return child
    return None


def find_all_files(paths: Iterable[str | Path], recursive: bool = False) -> list[Path]:
    files: list[Path] = []
    for raw in paths:
        p = Path(raw)
        if p.is_file():
            files.append(p)
        elif p.is_dir():
            candidates = p.rglob("*") if recursive else p.glob("*")
            files.extend(c for c in candidates if c.is_file() and c.name.lower() == MODINFO_FILENAME.lower())
    # stable, de-duplicated order
    return sorted(set(files))


def load_or_report(raw: str | Path) -> Modinfo | None:
    """Validated read; prints the error and returns None on failure."""
    path = resolve_modinfo_path(raw)
    try:
        return Modinfo.from_file(path)
    except ModinfoError as e:
        print(f"{path}: {e}", file=sys.stderr)
        return None


def save_or_report(modinfo: Modinfo, target: str | Path | None = None) -> int:
    try:
        modinfo.write(target)
    except ModinfoError as e:
        print(f"Write failed: {e}", file=sys.stderr)
        return 1
    return 0
