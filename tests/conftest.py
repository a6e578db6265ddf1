from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Isolation of the user data directory and of the root logger.
3. Shared tree diagram fixtures.
"""

import logging
import os
import sys
from typing import Iterator

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from dircraft.domain import config as domain_config  # noqa: E402
from dircraft.infra.logging.core import (  # noqa: E402
    _CONFIGURED_FLAG_ATTR,
    _remove_our_handlers,
    _stop_existing_listener,
)


# -----------------------------------------------------------------------------
# Environment Isolation
# -----------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def isolated_user_data(tmp_path, monkeypatch) -> str:
    """Redirect persisted config to a temporary directory."""
    data_dir = tmp_path / "user_data"
    data_dir.mkdir()
    monkeypatch.setattr(domain_config, "get_user_data_dir", lambda: str(data_dir))
    return str(data_dir)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Detach handlers installed by configure_logging after each test."""
    yield
    root = logging.getLogger()
    _stop_existing_listener(root)
    _remove_our_handlers(root)
    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree() -> str:
    """A well-formed diagram with nested folders and comments."""
    return (
        "project/\n"
        "├── src/\n"
        "│   ├── components/\n"
        "│   │   ├── Button.js # Button component\n"
        "│   │   └── Input.js\n"
        "│   └── index.js\n"
        "└── package.json # Project dependencies\n"
    )


@pytest.fixture
def sample_paths() -> list:
    """Paths the sample tree parses into, in line order."""
    return [
        "project/",
        "project/src/",
        "project/src/components/",
        "project/src/components/Button.js",
        "project/src/components/Input.js",
        "project/src/index.js",
        "project/package.json",
    ]
