#!/usr/bin/env python3
"""
Purpose:
    Provides common utility functions such as word splitting and case
    conversion for field/display names, dictionary merge, and file I/O
    utilities for modinfo.
"""

import json
from pathlib import Path
from typing import Dict, Any, List

from modinfo.core.constants import DEFAULT_TEXT_ENCODING


# --- Case Conversion --- #

_SEPARATORS = frozenset(" \t\r\n_-")


def split_words(text: str) -> List[str]:
    """
    Split an identifier into words.

    Boundaries are whitespace, '_' and '-', a lower-to-upper change
    ('someName'), a letter/digit change ('mod2Go') and the end of an acronym
    ('HTTPServer' -> 'HTTP', 'Server').
    """
    words: List[str] = []
    current = ""
    for i, ch in enumerate(text):
        if ch in _SEPARATORS:
            if current:
                words.append(current)
            current = ""
            continue
        if current and _is_boundary(current[-1], ch, text[i + 1:i + 2]):
            words.append(current)
            current = ""
        current += ch
    if current:
        words.append(current)
    return words


def _is_boundary(prev: str, ch: str, nxt: str) -> bool:
    if prev.islower() and ch.isupper():
        return True
    if (prev.isalpha() and ch.isdigit()) or (prev.isdigit() and ch.isalpha()):
        return True
    # acronym followed by a capitalized word
    return prev.isupper() and ch.isupper() and nxt.islower()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_title_case(text: str) -> str:
    """'SomeInternalName' -> 'Some Internal Name'."""
    return " ".join(_capitalize(w) for w in split_words(text))


def to_pascal_case(text: str) -> str:
    """'display_name' -> 'DisplayName'."""
    return "".join(_capitalize(w) for w in split_words(text))


# --- Generic Utilities --- #

def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Recursively merge two dictionaries (values from 'override' take precedence).
    Non-dict values are overwritten; dict values are merged depth-first.
    """
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = merge_dicts(result[k], v)
        else:
            result[k] = v
    return result


# --- File I/O Helpers --- #

def load_json_file(path: Path) -> Dict[str, Any]:
    """
    Load a JSON file from 'path'. Returns an empty dict if the file is missing.

    Raises:
        ValueError: if the file exists but contains invalid JSON.
    """
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding=DEFAULT_TEXT_ENCODING) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(
            f"Invalid JSON in {str(path)!r}: {e.msg} (line {e.lineno}, col {e.colno})"
        ) from e
