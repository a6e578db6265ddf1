from __future__ import annotations

"""
Build Planner.

Composes the tree parser and the path classifier into a single BuildPlan
and renders the human-readable preview shown before anything is written.
"""

from typing import Any, Dict, List

from dircraft.core.parsing import classify_paths, parse_tree
from dircraft.domain.plan_models import BuildPlan


def build_plan(text: str) -> BuildPlan:
    """Parse diagram text and classify its paths into a BuildPlan."""
    parsed = parse_tree(text)
    classified = classify_paths(parsed.paths)
    return BuildPlan(
        paths=parsed.paths,
        comments=parsed.comments,
        directories=classified.directories,
        files=classified.files,
    )


def render_plan_lines(plan: BuildPlan) -> List[str]:
    """
    Produce one preview line per directory and file, directories first.

    Args:
        plan: The plan to describe.

    Returns:
        List[str]: Lines such as '[DIR]  src/ (Sources)'.
    """
    lines: List[str] = []
    for directory in plan.directories:
        lines.append(f"[DIR]  {directory}{_comment_suffix(plan, directory)}")
    for file_path in plan.files:
        lines.append(f"[FILE] {file_path}{_comment_suffix(plan, file_path)}")
    return lines


def summarize_plan(plan: BuildPlan, output_dir: str) -> Dict[str, Any]:
    """Counters reported before confirmation and attached to results."""
    return {
        "directories": len(plan.directories),
        "files": len(plan.files),
        "comments": len(plan.comments),
        "output_dir": output_dir,
    }


def _comment_suffix(plan: BuildPlan, path: str) -> str:
    comment = plan.comment_for(path)
    return f" ({comment})" if comment else ""
