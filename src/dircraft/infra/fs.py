from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides the filesystem capability consumed by the build pipeline
(recursive directory creation, empty file creation, text reading) and the
cross-platform path helpers shared by the interfaces. Acts as an
abstraction over the 'os' module so the pipeline can be driven against a
real disk or an in-memory double.
"""

import os
from typing import Optional, Protocol, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "DirCraft"
UNIX_APP_DIR_NAME = ".dircraft"

# -----------------------------------------------------------------------------
# FILESYSTEM CAPABILITY
# -----------------------------------------------------------------------------

class FileSystem(Protocol):
    """Minimal set of operations the build pipeline needs."""

    def make_dirs(self, path: str) -> None:
        ...

    def write_empty_file(self, path: str) -> None:
        ...

    def read_text(self, path: str) -> str:
        ...


class LocalFileSystem:
    """
    Filesystem capability backed by the local disk.

    Directories are created with their parents and without error when they
    already exist. Files are created empty, replacing existing content.
    """

    def make_dirs(self, path: str) -> None:
        os.makedirs(path, exist_ok=True)

    def write_empty_file(self, path: str) -> None:
        with open(path, "w", encoding="utf-8"):
            pass

    def read_text(self, path: str) -> str:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Return the per-user directory that holds config.json and the GUI logs.

    %LOCALAPPDATA%/DirCraft on Windows (APPDATA as second choice),
    ~/.dircraft everywhere else. The directory is created on first use;
    a failure to create it is left for the eventual writer to report.
    """
    base = ""
    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA") or ""

    if base:
        data_dir = os.path.join(base, APP_DIR_NAME)
    else:
        data_dir = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    safe_mkdir(data_dir)
    return os.path.abspath(data_dir)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Turn a user-typed destination into an absolute path.

    '~' and environment variables are expanded. Blank input resolves to
    the fallback.

    Args:
        path: Value from a CLI flag, GUI entry or persisted session.
        fallback: Used when the value is None or blank.

    Returns:
        str: Absolute path.
    """
    raw = path.strip() if path else ""
    expanded = os.path.expanduser(os.path.expandvars(raw or fallback))
    return os.path.abspath(expanded)


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """Create a directory tree, reporting failure as (False, reason) instead of raising."""
    try:
        os.makedirs(path, exist_ok=True)
    except OSError as e:
        return False, str(e)
    return True, None
