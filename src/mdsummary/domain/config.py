from __future__ import annotations

"""
Configuration Domain Management.

Handles the runtime configuration dictionary and its optional persistence
as JSON in the per-user data directory (or an explicit file).
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from mdsummary.infra.fs import ensure_parent_dir, get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_default_config_path() -> str:
    """Location of the persisted configuration in the user data directory."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.
    This dictionary drives the behavior of the pipeline.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # IO Paths
        "input_path": os.getcwd(),
        "output_path": "",

        # Reporting
        "print_summary": False,

        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from disk, merged over the defaults.

    Unknown keys are ignored. A missing file silently yields defaults;
    a corrupted one is reported and also yields defaults.

    Args:
        path: Explicit JSON file. Defaults to the user data directory file.

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config = get_default_config()
    config_file = path or get_default_config_path()

    if not os.path.exists(config_file):
        logger.debug(f"Config file not found at {config_file}. Using defaults.")
        return config

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_file}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_file}'. Using defaults.")
        return config

    for key in config:
        if key in data:
            config[key] = data[key]

    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk.

    Args:
        config: The configuration dictionary to save.
        path: Explicit JSON file. Defaults to the user data directory file.
    """
    config_file = path or get_default_config_path()
    payload = {k: v for k, v in config.items() if k in get_default_config()}
    payload["version"] = CURRENT_CONFIG_VERSION

    try:
        ensure_parent_dir(config_file)
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_file}")
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
