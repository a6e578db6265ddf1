from __future__ import annotations

"""
Domain Constants.

Centralizes the tree-diagram glyph set, application identity and
session defaults shared by the parser, the pipeline and the interfaces.
"""

from typing import Any, Dict

from dircraft import __version__

APP_NAME = "DirCraft"
CURRENT_CONFIG_VERSION = __version__

# -----------------------------------------------------------------------------
# TREE DIAGRAM GLYPHS
# -----------------------------------------------------------------------------

VERTICAL_GLYPH = "│"
BRANCH_GLYPH = "├──"
LAST_BRANCH_GLYPH = "└──"
COMMENT_MARKER = "#"
PATH_SEPARATOR = "/"

# -----------------------------------------------------------------------------
# USER-FACING MESSAGES
# -----------------------------------------------------------------------------

CONFIRM_QUESTION = "Do you want to create this structure?"
DRY_RUN_NOTICE = "DRY RUN: No files or directories were created."
EMPTY_STRUCTURE_ERROR = "No valid structure found in the input."
CANCELLED_MESSAGE = "Operation cancelled."

# -----------------------------------------------------------------------------
# SESSION DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_SESSION: Dict[str, Any] = {
    "output_dir": ".",
    "skip_confirmation": False,
    "dry_run": False,
    "last_structure": "",
}

SAMPLE_STRUCTURE = """my-project/
├── src/
│   ├── components/
│   │   └── Button.js # Reusable button
│   └── index.js
└── package.json # Project dependencies"""
