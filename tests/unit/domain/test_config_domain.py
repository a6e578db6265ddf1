from __future__ import annotations

"""
Unit tests for the Config Domain.

Verifies:
1. Default configuration generation.
2. Resilience against missing and corrupted config files.
3. Persistence (Save/Load) inside the isolated user data directory.
"""

import json
import os

from dircraft.domain.config import (
    get_config_file,
    get_default_app_state,
    get_default_config,
    load_app_state,
    load_config,
    save_config,
)
from dircraft.domain.constants import CURRENT_CONFIG_VERSION


def test_default_config_targets_cwd() -> None:
    cfg = get_default_config()
    assert cfg["output_dir"] == os.getcwd()
    assert cfg["skip_confirmation"] is False
    assert cfg["dry_run"] is False


def test_config_file_lives_in_user_data_dir(isolated_user_data) -> None:
    assert get_config_file() == os.path.join(isolated_user_data, "config.json")


def test_load_fresh_state_returns_defaults() -> None:
    state = load_app_state()
    assert state == get_default_app_state()
    assert state["version"] == CURRENT_CONFIG_VERSION


def test_load_corrupted_file_returns_defaults() -> None:
    with open(get_config_file(), "w", encoding="utf-8") as f:
        f.write("{ not json")

    state = load_app_state()
    assert state["last_session"]["dry_run"] is False


def test_load_non_dict_payload_returns_defaults() -> None:
    with open(get_config_file(), "w", encoding="utf-8") as f:
        json.dump(["a", "b"], f)

    assert load_app_state()["app_settings"]["theme"] == "System"


def test_saved_session_is_merged_over_defaults(tmp_path) -> None:
    target = str(tmp_path / "project")
    assert save_config({"output_dir": target, "dry_run": True})

    loaded = load_config()
    assert loaded["output_dir"] == target
    assert loaded["dry_run"] is True
    # Keys missing from the file come from defaults
    assert loaded["skip_confirmation"] is False
