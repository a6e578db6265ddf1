from __future__ import annotations

"""
Core build orchestration.

Coordinates a complete build run:
1. Parses the diagram into a BuildPlan.
2. Reports a summary and a preview of the plan.
3. Stops early on dry runs.
4. Asks for confirmation unless skipped.
5. Materializes directories, then files.

Failures are caught here, logged with their stack and returned as an
error BuildResult; the interface layer decides the exit status.
"""

import logging
import threading
from typing import Callable, Optional

from dircraft.core.pipeline.materializer import materialize_plan
from dircraft.core.pipeline.planner import build_plan, render_plan_lines, summarize_plan
from dircraft.domain import constants as const
from dircraft.domain.plan_models import (
    BuildResult,
    create_error_result,
    create_success_result,
)
from dircraft.infra.fs import FileSystem, LocalFileSystem

logger = logging.getLogger(__name__)
progress = logging.getLogger("dircraft.progress")

ConfirmFunc = Callable[[str], bool]


# -----------------------------------------------------------------------------
# CONFIRMATION GATE
# -----------------------------------------------------------------------------

def ask_confirmation(message: str, input_func: Callable[[str], str] = input) -> bool:
    """
    Prompt on the terminal and interpret the answer.

    An empty answer, 'y' or 'yes' (any case) confirms.

    Args:
        message: Question shown to the user.
        input_func: Line reader, injectable for tests.

    Returns:
        bool: True if the user confirmed.
    """
    try:
        answer = input_func(f"{message} (Y/n): ")
    except EOFError:
        return False
    return answer.strip().lower() in ("", "y", "yes")


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_build(
        text: str,
        output_dir: str = ".",
        *,
        skip_confirmation: bool = False,
        dry_run: bool = False,
        confirm: Optional[ConfirmFunc] = None,
        fs: Optional[FileSystem] = None,
        cancellation_event: Optional[threading.Event] = None,
) -> BuildResult:
    """
    Build the structure described by a tree diagram.

    Args:
        text: Diagram text.
        output_dir: Directory under which the structure is created.
        skip_confirmation: Bypass the confirmation gate.
        dry_run: Preview the plan without touching the filesystem.
        confirm: Confirmation gate; defaults to a terminal prompt.
        fs: Filesystem capability; defaults to the local disk.
        cancellation_event: Checked right before materialization starts.

    Returns:
        BuildResult: Structured outcome. Never raises for ordinary failures.
    """
    fs = fs or LocalFileSystem()
    confirm = confirm or ask_confirmation

    try:
        progress.info("Analyzing structure...")
        plan = build_plan(text)

        if plan.is_empty:
            progress.info(const.EMPTY_STRUCTURE_ERROR)
            return create_error_result(const.EMPTY_STRUCTURE_ERROR, output_dir)

        summary = summarize_plan(plan, output_dir)
        _report_plan(plan, summary)

        if dry_run:
            progress.info(const.DRY_RUN_NOTICE)
            return create_success_result(
                output_dir, plan, dry_run=True, summary_extra=summary
            )

        if not skip_confirmation and not confirm(const.CONFIRM_QUESTION):
            progress.info(const.CANCELLED_MESSAGE)
            return create_error_result(
                const.CANCELLED_MESSAGE, output_dir, plan, cancelled=True, summary_extra=summary
            )

        if cancellation_event is not None and cancellation_event.is_set():
            progress.info(const.CANCELLED_MESSAGE)
            return create_error_result(
                const.CANCELLED_MESSAGE, output_dir, plan, cancelled=True, summary_extra=summary
            )

        progress.info("Creating structure...")
        created = materialize_plan(plan, output_dir, fs, on_progress=_report_created)

        progress.info(f"Structure successfully created in {output_dir}")
        return create_success_result(output_dir, plan, created=created, summary_extra=summary)

    except Exception as e:
        logger.error(f"Build failed: {e}", exc_info=True)
        return create_error_result(str(e), output_dir)


def run_build_from_file(
        file_path: str,
        output_dir: str = ".",
        *,
        fs: Optional[FileSystem] = None,
        **options,
) -> BuildResult:
    """
    Read a diagram file and build it.

    Args:
        file_path: Path of the structure file (UTF-8).
        output_dir: Directory under which the structure is created.
        fs: Filesystem capability used for reading and writing.
        **options: Forwarded to run_build.

    Returns:
        BuildResult: Structured outcome; unreadable files yield an error result.
    """
    fs = fs or LocalFileSystem()
    progress.info(f"Reading structure from: {file_path}")
    try:
        text = fs.read_text(file_path)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read structure file '{file_path}': {e}", exc_info=True)
        return create_error_result(str(e), output_dir)

    return run_build(text, output_dir, fs=fs, **options)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _report_plan(plan, summary) -> None:
    """Log the summary block and the preview of every entry."""
    progress.info("Summary of the structure to create:")
    progress.info(f"- Directories: {summary['directories']}")
    progress.info(f"- Files: {summary['files']}")
    progress.info(f"- Destination directory: {summary['output_dir']}")
    progress.info("Structure that will be created:")
    for line in render_plan_lines(plan):
        progress.info(f"  {line}")


def _report_created(kind: str, target: str, comment: str) -> None:
    label = "Directory created" if kind == "dir" else "File created"
    suffix = f" ({comment})" if comment else ""
    progress.info(f"{label}: {target}{suffix}")
