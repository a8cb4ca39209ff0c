from __future__ import annotations

"""
Configuration Domain Management.

Handles the session configuration of a conversion run. A configuration file
is only read or written when the caller names one explicitly; nothing is
stored on its own. Missing or corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict

from cheattable2csv.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_INPUT_PATH,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_PATH,
)
from cheattable2csv.infra.fs import ensure_parent_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------

# Keys read from a config file; anything else in the file is ignored
CONFIG_KEYS = (
    "input_path",
    "output_path",
    "max_depth",
    "overwrite",
    "log_level",
    "log_file",
)


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": DEFAULT_INPUT_PATH,
        "output_path": DEFAULT_OUTPUT_PATH,

        # Flattening
        "max_depth": DEFAULT_MAX_DEPTH,

        # Safety
        "overwrite": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: str) -> Dict[str, Any]:
    """
    Load a configuration file merged over the defaults.

    Args:
        path: Config file location chosen by the caller.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config = get_default_config()

    if not os.path.exists(path):
        logger.warning(f"Config file not found: {path}. Using defaults.")
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

    session = data.get("session", data)
    if isinstance(session, dict):
        config.update({k: v for k, v in session.items() if k in CONFIG_KEYS})

    return config


def save_config(config: Dict[str, Any], path: str) -> None:
    """
    Write the configuration to a file chosen by the caller.

    Args:
        config: The configuration dictionary to save.
        path: Target config file location.
    """
    payload = {
        "version": CURRENT_CONFIG_VERSION,
        "session": {k: config[k] for k in CONFIG_KEYS if k in config},
    }

    try:
        ensure_parent_dir(path)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=4)
        logger.debug(f"Configuration saved to {path}")
    except OSError as e:
        logger.error(f"Failed to save config: {e}")
