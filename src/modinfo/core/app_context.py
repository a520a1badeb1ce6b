#!/usr/bin/env python3
"""
Purpose:
    Wires together the modinfo application context: merged configuration,
    the default layout for new files, and logging setup for the CLI.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from modinfo.core.config import load_config
from modinfo.core.fields import ModinfoFormat

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


# --- Data model --- #

@dataclass(frozen=True)
class AppContext:
    """Immutable container for configuration and derived settings."""
    config: Dict[str, Any]
    default_format: ModinfoFormat


# --- Factory --- #

def build_context(
    *,
    config: Optional[Dict[str, Any]] = None,
    configure_logging: bool = True,
) -> AppContext:
    """
    Build an `AppContext`.

    Args:
        config:
            Pre-merged configuration. If omitted, `load_config()` is used.
        configure_logging:
            If True, sets up root logging from `config['logging']['level']`.

    Raises:
        ValueError: if `config['default_format']` is not 'current' or 'legacy'.
    """
    cfg = config or load_config()

    raw_format = str(cfg.get("default_format", ModinfoFormat.CURRENT.value)).strip().lower()
    try:
        default_format = ModinfoFormat(raw_format)
    except ValueError as e:
        raise ValueError(
            f"Invalid default_format {raw_format!r}; expected one of "
            f"{[f.value for f in ModinfoFormat]}"
        ) from e

    if configure_logging:
        level = str(cfg.get("logging", {}).get("level", "WARNING")).upper()
        logging.basicConfig(level=level, format=LOG_FORMAT)

    return AppContext(config=cfg, default_format=default_format)
