from __future__ import annotations

"""
Build Controller.

Bridges the editor widgets and the build pipeline: keeps the session
configuration in sync with the view, previews plans, runs the
confirmation dialog on the main thread and drives background builds.
"""

import logging
import threading
import tkinter.messagebox as mb
from typing import Any, Dict

from dircraft.core.pipeline.planner import build_plan, render_plan_lines
from dircraft.core.pipeline.validator import validate_config
from dircraft.domain import constants as const
from dircraft.domain.plan_models import BuildResult
from dircraft.interface.gui import threads
from dircraft.utils.i18n import i18n

logger = logging.getLogger(__name__)

# Preview lines shown inside the confirmation dialog
_DIALOG_PREVIEW_LIMIT = 25


class BuildController:
    """Owns the session config and the lifecycle of GUI builds."""

    def __init__(self, app: Any, config: Dict[str, Any], app_state: Dict[str, Any]):
        self.app = app
        self.config = config
        self.app_state = app_state
        self._cancellation_event = threading.Event()

        self.editor_view: Any = None
        self.logs_view: Any = None

    def register_views(self, editor: Any, logs: Any) -> None:
        self.editor_view = editor
        self.logs_view = logs

    # -------------------------------------------------------------------------
    # CONFIGURATION SYNCHRONIZATION
    # -------------------------------------------------------------------------

    def sync_config_from_view(self) -> None:
        """Read widget values into the session config, then normalize it."""
        if not self.editor_view:
            return

        raw = {
            "output_dir": self.editor_view.entry_output.get(),
            "skip_confirmation": bool(self.editor_view.sw_skip_confirmation.get()),
            "dry_run": bool(self.editor_view.sw_dry_run.get()),
            "last_structure": self.editor_view.get_structure(),
        }
        clean, warnings = validate_config(raw, strict=False)
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")
        self.config.update(clean)

    # -------------------------------------------------------------------------
    # ACTIONS
    # -------------------------------------------------------------------------

    def preview(self) -> None:
        """Log the plan of the current diagram without building it."""
        self.sync_config_from_view()
        plan = build_plan(self.config["last_structure"])
        if plan.is_empty:
            mb.showwarning(i18n.t("gui.dialogs.error_title"), i18n.t("gui.dialogs.empty_structure"))
            return

        logger.info(f"Preview: {len(plan.directories)} directories, {len(plan.files)} files")
        for line in render_plan_lines(plan):
            logger.info(f"  {line}")

    def start_build(self) -> None:
        """Confirm (unless skipped) and launch the build in a worker thread."""
        self.sync_config_from_view()
        text = self.config["last_structure"]
        plan = build_plan(text)

        if plan.is_empty:
            mb.showwarning(i18n.t("gui.dialogs.error_title"), i18n.t("gui.dialogs.empty_structure"))
            return

        dry_run = self.config["dry_run"]
        if not dry_run and not self.config["skip_confirmation"]:
            if not mb.askyesno(i18n.t("gui.dialogs.confirm_title"), self._confirmation_text(plan)):
                logger.info(const.CANCELLED_MESSAGE)
                return

        self.set_ui_state(disabled=True)
        self._cancellation_event.clear()
        logger.debug(f"Starting build (DryRun={dry_run}) into {self.config['output_dir']}")

        threading.Thread(
            target=threads.run_build_task,
            args=(
                text,
                self.config["output_dir"],
                dry_run,
                self.handle_thread_callback,
                self._cancellation_event,
            ),
            daemon=True
        ).start()

    def abort_build(self) -> None:
        """Signal the worker to stop before it writes anything."""
        if not self._cancellation_event.is_set():
            logger.info("User requested build cancellation.")
            self._cancellation_event.set()

    # -------------------------------------------------------------------------
    # RESULT HANDLING
    # -------------------------------------------------------------------------

    def handle_thread_callback(self, result: Any) -> None:
        """Schedule result processing on the Tk main thread."""
        self.app.after(0, lambda: self.process_result(result))

    def process_result(self, result: Any) -> None:
        """Re-enable the UI and report the outcome of a build."""
        self.set_ui_state(disabled=False)

        if isinstance(result, BuildResult):
            if result.ok:
                if result.dry_run:
                    msg = i18n.t("cli.status.dry_run")
                else:
                    msg = i18n.t(
                        "cli.status.created",
                        dirs=len(result.directories),
                        files=len(result.files),
                        path=result.output_dir,
                    )
                mb.showinfo(i18n.t("gui.dialogs.done_title"), msg)
            elif not result.cancelled:
                mb.showerror(i18n.t("gui.dialogs.build_failed"), result.error)
        elif isinstance(result, Exception):
            mb.showerror(i18n.t("gui.dialogs.build_failed"), str(result))

    def set_ui_state(self, disabled: bool) -> None:
        """Enable or disable the action buttons during a build."""
        if not self.editor_view:
            return
        state = "disabled" if disabled else "normal"
        text = i18n.t("gui.editor.btn_building") if disabled else i18n.t("gui.editor.btn_build")
        self.editor_view.btn_build.configure(state=state, text=text)
        self.editor_view.btn_preview.configure(state=state)

    # -------------------------------------------------------------------------
    # HELPERS
    # -------------------------------------------------------------------------

    def _confirmation_text(self, plan: Any) -> str:
        lines = render_plan_lines(plan)
        shown = lines[:_DIALOG_PREVIEW_LIMIT]
        if len(lines) > len(shown):
            shown.append(f"... (+{len(lines) - len(shown)} more)")
        header = (
            f"- Directories: {len(plan.directories)}\n"
            f"- Files: {len(plan.files)}\n"
            f"- Destination directory: {self.config['output_dir']}\n"
        )
        return f"{header}\n" + "\n".join(shown) + f"\n\n{const.CONFIRM_QUESTION}"
