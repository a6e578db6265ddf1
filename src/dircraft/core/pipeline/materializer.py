from __future__ import annotations

"""
Plan Materializer.

Issues the filesystem operations for a BuildPlan: every directory first,
shallowest first, then every file created empty. There is no rollback; an
error leaves the partially created tree in place and propagates.
"""

import logging
import os
from typing import Callable, List, Optional

from dircraft.domain.plan_models import BuildPlan
from dircraft.infra.fs import FileSystem

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, str, str], None]


def materialize_plan(
        plan: BuildPlan,
        output_dir: str,
        fs: FileSystem,
        *,
        on_progress: Optional[ProgressCallback] = None,
) -> List[str]:
    """
    Create the directories and files of a plan under output_dir.

    Args:
        plan: Plan to materialize.
        output_dir: Destination root.
        fs: Filesystem capability performing the writes.
        on_progress: Optional callback(kind, target_path, comment) invoked
            after each entry is created, kind being 'dir' or 'file'.

    Returns:
        List[str]: Target paths in creation order.

    Raises:
        OSError: Propagated from the filesystem capability.
    """
    created: List[str] = []

    for directory in plan.directories:
        target = _target_path(output_dir, directory)
        fs.make_dirs(target)
        created.append(target)
        logger.debug(f"Directory created: {target}")
        if on_progress:
            on_progress("dir", target, plan.comment_for(directory))

    for file_path in plan.files:
        target = _target_path(output_dir, file_path)
        fs.make_dirs(os.path.dirname(target) or output_dir)
        fs.write_empty_file(target)
        created.append(target)
        logger.debug(f"File created: {target}")
        if on_progress:
            on_progress("file", target, plan.comment_for(file_path))

    return created


def _target_path(output_dir: str, path: str) -> str:
    """Join a plan path under output_dir; absolute plan paths stay inside it."""
    return os.path.normpath(os.path.join(output_dir, path.lstrip("/")))
