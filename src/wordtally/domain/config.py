from __future__ import annotations

"""
Configuration Domain Management.

Handles the session configuration dictionary that drives an analysis run,
its optional persistence as JSON in the user data directory, and default
fallback when the stored file is missing or corrupted.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from wordtally.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_ENCODING,
    DEFAULT_TOP_N,
)
from wordtally.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration (Session State).

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO
        "input_path": "",
        "encoding": DEFAULT_ENCODING,

        # Reporting
        "top_n": DEFAULT_TOP_N,
        "sort_alphabetically": False,
        "show_sentence": True,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


def get_default_config_path() -> str:
    """Return the location of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a configuration from disk, merged over the defaults.

    Unknown keys are ignored. Missing or unreadable files fall back to the
    defaults instead of failing.

    Args:
        config_file: Explicit JSON file; defaults to the user data location.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    path = config_file or get_default_config_path()

    if not os.path.exists(path):
        logger.debug(f"Config file not found at '{path}'. Returning defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]
    return config


def save_config(config: Dict[str, Any], config_file: Optional[str] = None) -> bool:
    """
    Persist the provided configuration as JSON.

    Args:
        config: Configuration dictionary to store.
        config_file: Explicit target file; defaults to the user data location.

    Returns:
        bool: True when the file was written.
    """
    path = config_file or get_default_config_path()
    known = get_default_config()
    payload = {k: v for k, v in config.items() if k in known}
    payload["version"] = CURRENT_CONFIG_VERSION

    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
