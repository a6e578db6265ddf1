from __future__ import annotations

"""
Background Worker Threads for GUI Operations.

Runs builds away from the Tk main loop so the window stays responsive
while directories and files are written. Results travel back through a
callback that the controller marshals onto the main thread.
"""

import logging
import threading
from typing import Any, Callable, Optional

from dircraft.core.pipeline.engine import run_build
from dircraft.domain import constants as const
from dircraft.domain.plan_models import create_error_result

logger = logging.getLogger(__name__)


def run_build_task(
        text: str,
        output_dir: str,
        dry_run: bool,
        on_complete: Callable[[Any], None],
        cancellation_event: Optional[threading.Event] = None
) -> None:
    """
    Execute a confirmed build in a background thread.

    The confirmation gate already ran on the main thread, so the engine is
    called with skip_confirmation=True.

    Args:
        text: Diagram text.
        output_dir: Destination directory.
        dry_run: Preview only.
        on_complete: Always called once: with the BuildResult (cancelled when
            aborted before start), or with the exception on crash.
        cancellation_event: Abort signal checked before materialization.
    """
    try:
        if cancellation_event and cancellation_event.is_set():
            logger.info("Build Thread: Aborted by user before start.")
            on_complete(create_error_result(const.CANCELLED_MESSAGE, output_dir, cancelled=True))
            return

        result = run_build(
            text,
            output_dir,
            skip_confirmation=True,
            dry_run=dry_run,
            cancellation_event=cancellation_event,
        )
        on_complete(result)

    except Exception as e:
        logger.critical(f"Build Thread: Critical failure detected: {e}", exc_info=True)
        on_complete(e)
