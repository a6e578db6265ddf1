from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of the last build session and global
application settings as JSON in the user data directory. Missing or
corrupted files fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from dircraft.domain.constants import CURRENT_CONFIG_VERSION, DEFAULT_SESSION
from dircraft.infra.fs import get_user_data_dir, safe_mkdir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default session configuration.

    Returns:
        Dict[str, Any]: Default build options.
    """
    config = dict(DEFAULT_SESSION)
    config["output_dir"] = os.getcwd()
    return config


def get_default_app_state() -> Dict[str, Any]:
    """
    Generate the complete default application state structure.

    Returns:
        Dict[str, Any]: The full JSON structure for config.json.
    """
    return {
        "version": CURRENT_CONFIG_VERSION,
        "app_settings": {
            "theme": "System",
        },
        "last_session": get_default_config(),
    }


def get_config_file() -> str:
    """Absolute path of the persisted state file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_app_state(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load application state from disk, merged over the defaults.

    Args:
        path: Override of the state file location.

    Returns:
        Dict[str, Any]: The loaded state or a default structure on failure.
    """
    config_file = path or get_config_file()
    state = get_default_app_state()

    if not os.path.exists(config_file):
        logger.debug("Config file not found. Returning defaults.")
        return state

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config: {e}. Using defaults.")
        return state

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return state

    if isinstance(data.get("app_settings"), dict):
        state["app_settings"].update(data["app_settings"])
    if isinstance(data.get("last_session"), dict):
        state["last_session"].update(data["last_session"])

    state["version"] = CURRENT_CONFIG_VERSION
    return state


def save_app_state(state: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist application state to disk.

    Args:
        state: The state dictionary to save.
        path: Override of the state file location.

    Returns:
        bool: True if the file was written.
    """
    config_file = path or get_config_file()
    ok, err = safe_mkdir(os.path.dirname(os.path.abspath(config_file)))
    if not ok:
        logger.error(f"Failed to save configuration: {err}")
        return False

    state["version"] = CURRENT_CONFIG_VERSION
    try:
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(state, f, ensure_ascii=False, indent=4)
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False

    logger.debug(f"Configuration saved to {config_file}")
    return True


# -----------------------------------------------------------------------------
# Facade API
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Retrieve the last session merged over the defaults."""
    return load_app_state(path)["last_session"]


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """Save the provided config as the 'last_session'."""
    state = load_app_state(path)
    state["last_session"] = config
    return save_app_state(state, path)
