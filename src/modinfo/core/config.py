#!/usr/bin/env python3
"""
modinfo configuration loader.
"""

import copy
import os
from pathlib import Path
from typing import Any, Dict, Final

from modinfo.core.utils import merge_dicts, load_json_file

# --- Defaults & locations --- #

DEFAULT_CONFIG: Final[Dict[str, Any]] = {
    "default_format": "current",
    "logging": {"level": "WARNING"},
}

GLOBAL_CONFIG_PATH: Final[Path] = Path.home() / ".config" / "modinfo" / "config.json"

PROJECT_CONFIG_NAME: Final[str] = "modinfo.json"


# --- Public API --- #

def load_config() -> Dict[str, Any]:
    """
    Load modinfo configuration with layered precedence.

    Order:
        1. Built-in defaults
        2. Global config (~/.config/modinfo/config.json)
        3. Project config (./modinfo.json)
        4. Environment overrides:
           - MODINFO_DEFAULT_FORMAT ("current" or "legacy")
           - MODINFO_LOG_LEVEL

    Returns:
        A merged configuration dictionary.
    """
    # 1) start with defaults
    config = copy.deepcopy(DEFAULT_CONFIG)

    # 2) global config
    config = merge_dicts(config, load_json_file(GLOBAL_CONFIG_PATH))

    # 3) project config
    project_path = Path.cwd() / PROJECT_CONFIG_NAME
    config = merge_dicts(config, load_json_file(project_path))

    # 4) environment overrides
    default_format_env = os.getenv("MODINFO_DEFAULT_FORMAT")
    if default_format_env:
        config["default_format"] = default_format_env.strip().lower()

    log_level_env = os.getenv("MODINFO_LOG_LEVEL")
    if log_level_env:
        config.setdefault("logging", {})["level"] = log_level_env

    return config
