from __future__ import annotations

"""
Tree Line Decomposition.

Reduces a single line of an ASCII tree diagram to its bare entry name and
optional trailing comment, and measures the line's nesting depth from its
vertical continuation glyphs.
"""

import re

from dircraft.domain.constants import (
    BRANCH_GLYPH,
    COMMENT_MARKER,
    LAST_BRANCH_GLYPH,
    VERTICAL_GLYPH,
)
from dircraft.domain.plan_models import DecomposedLine

# Leading indentation run: whitespace and '│', then at most one branch glyph.
_PREFIX_RX = re.compile(
    rf"^[\s{re.escape(VERTICAL_GLYPH)}]*"
    rf"(?:{re.escape(BRANCH_GLYPH)}|{re.escape(LAST_BRANCH_GLYPH)})?\s*"
)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def decompose_line(line: str) -> DecomposedLine:
    """
    Split a diagram line into name and comment, stripping tree glyphs.

    Everything after the first '#' is the comment. The name segment loses
    its leading glyph run as a unit and is trimmed. Lines made only of
    glyphs and whitespace yield an empty name, which callers skip.

    Args:
        line: Raw line of the diagram.

    Returns:
        DecomposedLine: The entry name and comment (both possibly empty).
    """
    raw_name, marker, raw_comment = line.partition(COMMENT_MARKER)
    comment = raw_comment.strip() if marker else ""
    name = _PREFIX_RX.sub("", raw_name, count=1).strip()
    return DecomposedLine(name=name, comment=comment)


def resolve_indentation(line: str) -> int:
    """
    Return the nesting depth of a line.

    The depth is a plain tally of '│' over the whole line, not only the
    leading prefix, so a stray bar inside a name or comment also counts.
    """
    return line.count(VERTICAL_GLYPH)
