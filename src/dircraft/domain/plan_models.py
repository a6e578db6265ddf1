from __future__ import annotations

"""
Build Plan Domain Data Models.

Defines the data structures exchanged between the tree parser, the build
pipeline and the interface layers (CLI/GUI), together with the factory
functions used to assemble build results.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# PARSER MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class DecomposedLine:
    """
    A single diagram line reduced to its entry name and trailing comment.

    Attributes:
        name: Glyph-stripped entry name. A trailing '/' marks a directory.
        comment: Text after the first '#', or an empty string.
    """
    name: str
    comment: str = ""

    @property
    def is_directory(self) -> bool:
        return self.name.endswith("/")


@dataclass(frozen=True)
class ParseResult:
    """
    Ordered output of the path assembler.

    Attributes:
        paths: Full paths in line order, root first when present.
        comments: Full path -> comment, only for non-empty comments.
    """
    paths: List[str] = field(default_factory=list)
    comments: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassificationResult:
    """
    Paths split into a depth-sorted directory list and a file list.

    Attributes:
        directories: Explicit and implied directories, shallowest first.
        files: File paths in their original order.
    """
    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class BuildPlan:
    """Everything required to materialize a parsed diagram."""
    paths: List[str] = field(default_factory=list)
    comments: Dict[str, str] = field(default_factory=dict)
    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.directories and not self.files

    def comment_for(self, path: str) -> str:
        return self.comments.get(path, "")

# -----------------------------------------------------------------------------
# BUILD RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Unified outcome of a build run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        output_dir: Destination directory the plan targets.
        dry_run: Whether the run only previewed the plan.
        cancelled: Whether the confirmation gate or the user aborted the run.
        directories: Directory paths of the plan, shallowest first.
        files: File paths of the plan.
        created: Absolute paths actually written to disk.
        summary: Counters and metadata for reporting.
    """
    ok: bool
    error: str

    output_dir: str
    dry_run: bool = False
    cancelled: bool = False

    directories: List[str] = field(default_factory=list)
    files: List[str] = field(default_factory=list)
    created: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        output_dir: str,
        plan: Optional[BuildPlan] = None,
        cancelled: bool = False,
        created: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a failed build result instance.

    Args:
        error: Detailed error description.
        output_dir: Destination directory of the failed run.
        plan: The plan being executed, if parsing got that far.
        cancelled: True when the run stopped on user refusal.
        created: Paths written before the failure occurred.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        BuildResult: An immutable error result object.
    """
    return BuildResult(
        ok=False,
        error=error,
        output_dir=output_dir,
        cancelled=cancelled,
        directories=list(plan.directories) if plan else [],
        files=list(plan.files) if plan else [],
        created=created or [],
        summary=summary_extra or {},
    )


def create_success_result(
        output_dir: str,
        plan: BuildPlan,
        created: Optional[List[str]] = None,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None
) -> BuildResult:
    """
    Create a successful build result instance.

    Args:
        output_dir: Destination directory.
        plan: The executed (or previewed) plan.
        created: Absolute paths written to disk.
        dry_run: Flag for preview-only runs.
        summary_extra: Final execution metrics.

    Returns:
        BuildResult: An immutable success result object.
    """
    return BuildResult(
        ok=True,
        error="",
        output_dir=output_dir,
        dry_run=dry_run,
        directories=list(plan.directories),
        files=list(plan.files),
        created=created or [],
        summary=summary_extra or {},
    )
