from __future__ import annotations

"""
Path Classification.

Partitions an ordered path list into directories and files, adding every
ancestor directory a file needs, and orders directories so shallower ones
come first.
"""

import posixpath
from typing import Dict, Iterable, List

from dircraft.domain.constants import PATH_SEPARATOR
from dircraft.domain.plan_models import ClassificationResult

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def classify_paths(paths: Iterable[str]) -> ClassificationResult:
    """
    Split paths into a depth-sorted directory list and an ordered file list.

    Paths ending in '/' are directories. For every file, each ancestor
    directory is added with a trailing '/', so a file listed without its
    folder line is still materializable. Directories are sorted by the
    number of '/' they contain; the sort is stable over first-seen order.

    Args:
        paths: Full paths as produced by the path assembler.

    Returns:
        ClassificationResult: Directories (shallowest first) and files.
    """
    # dict keys keep insertion order, giving a deterministic set
    directories: Dict[str, None] = {}
    files: List[str] = []

    for path in paths:
        if path.endswith(PATH_SEPARATOR):
            directories.setdefault(path, None)
            continue

        files.append(path)
        for parent in _parent_chain(path):
            directories.setdefault(parent + PATH_SEPARATOR, None)

    ordered = sorted(directories, key=lambda d: d.count(PATH_SEPARATOR))
    return ClassificationResult(directories=ordered, files=files)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _parent_chain(path: str) -> List[str]:
    """Return the ancestor directories of a path, deepest first."""
    chain: List[str] = []
    current = posixpath.dirname(path)
    while current and current not in (".", PATH_SEPARATOR):
        chain.append(current)
        parent = posixpath.dirname(current)
        if parent == current:
            break
        current = parent
    return chain
