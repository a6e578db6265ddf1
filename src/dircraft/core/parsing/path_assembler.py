from __future__ import annotations

"""
Tree Path Assembler.

Walks an ASCII tree diagram top to bottom and turns it into an ordered
list of full paths plus a comment lookup. Malformed input never raises:
each line either contributes a path or is skipped.
"""

import logging
from typing import Dict, List

from dircraft.core.parsing.line_decomposer import decompose_line, resolve_indentation
from dircraft.domain.plan_models import ParseResult

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_tree(text: str) -> ParseResult:
    """
    Parse a full diagram into ordered paths and a path -> comment map.

    The first non-blank line is the root. Every later line is placed under
    the directory found on the ancestor stack at its depth. When the stack
    is shallower than the line's depth, the line falls back to the current
    top of the stack instead of failing, which keeps hand-typed trees with
    inconsistent indentation usable.

    Args:
        text: Whole diagram text.

    Returns:
        ParseResult: Paths in line order and non-empty comments. Empty input
        produces an empty result.
    """
    lines = [line for line in (text or "").split("\n") if line.strip()]
    if not lines:
        return ParseResult(paths=[], comments={})

    paths: List[str] = []
    comments: Dict[str, str] = {}

    root = decompose_line(lines[0])
    if root.name:
        paths.append(root.name)
        if root.comment:
            comments[root.name] = root.comment

    # stack[0] is the root path, possibly empty
    stack: List[str] = [root.name]

    for line in lines[1:]:
        entry = decompose_line(line)
        if not entry.name:
            continue

        level = resolve_indentation(line)
        while len(stack) > level + 1:
            stack.pop()

        parent = stack[-1] or ""
        full_path = parent + entry.name
        paths.append(full_path)

        if entry.is_directory:
            stack.append(full_path)

        # Last write wins on duplicate paths
        if entry.comment:
            comments[full_path] = entry.comment

    logger.debug(f"Parsed {len(lines)} lines into {len(paths)} paths.")
    return ParseResult(paths=paths, comments=comments)
