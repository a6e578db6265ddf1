from __future__ import annotations

"""
GUI Entrypoint and Application Lifecycle Orchestrator.

Initializes logging, restores the last session, assembles the editor and
log console, binds them to the BuildController and runs the Tk main loop.
Log records reach the console widget through a queue polled on the main
thread.
"""

import logging
import queue
from typing import Any

import customtkinter as ctk

from dircraft.domain import config as cfg
from dircraft.domain import constants as const
from dircraft.infra.logging import (
    LoggingConfig,
    attach_queue_handler,
    configure_logging,
    get_default_gui_log_path,
)
from dircraft.interface.gui.components.editor import EditorFrame
from dircraft.interface.gui.components.logs_console import LogsFrame
from dircraft.interface.gui.components.main_window import create_main_window
from dircraft.interface.gui.controllers.build_controller import BuildController

logger = logging.getLogger(__name__)


def main() -> None:
    """Initialize and launch the Graphical User Interface."""
    # PHASE 1: Diagnostics
    configure_logging(LoggingConfig(level="INFO", console=True, log_file=get_default_gui_log_path()))
    logger.info(f"GUI Lifecycle: Initializing v{const.CURRENT_CONFIG_VERSION}")

    gui_log_queue: queue.Queue = queue.Queue()
    attach_queue_handler(gui_log_queue, logging.INFO)

    # PHASE 2: Persistent state recovery
    app_state = cfg.load_app_state()
    config = app_state["last_session"]
    if not config.get("last_structure"):
        config["last_structure"] = const.SAMPLE_STRUCTURE

    # PHASE 3: View construction
    app = create_main_window(app_state["app_settings"])

    editor_frame = EditorFrame(app, config)
    editor_frame.grid(row=0, column=0, sticky="nsew", padx=20, pady=(20, 10))

    logs_frame = LogsFrame(app)
    logs_frame.grid(row=1, column=0, sticky="nsew", padx=20, pady=(0, 20))

    # PHASE 4: Controller binding
    controller = BuildController(app, config, app_state)
    controller.register_views(editor_frame, logs_frame)

    editor_frame.btn_build.configure(command=controller.start_build)
    editor_frame.btn_preview.configure(command=controller.preview)
    editor_frame.btn_browse_out.configure(
        command=lambda: _browse_folder(app, editor_frame.entry_output)
    )

    # PHASE 5: Log polling
    log_formatter = logging.Formatter("%(asctime)s | %(message)s", "%H:%M:%S")

    def poll_log_queue() -> None:
        """Flush queued records into the console widget."""
        while True:
            try:
                record = gui_log_queue.get_nowait()
            except queue.Empty:
                break
            logs_frame.append_log(log_formatter.format(record))
        app.after(100, poll_log_queue)

    # PHASE 6: Lifecycle finalization
    def on_closing() -> None:
        """Persist the session, stop pending builds and close the window."""
        controller.abort_build()
        controller.sync_config_from_view()
        app_state["last_session"] = controller.config
        cfg.save_app_state(app_state)
        app.destroy()

    app.protocol("WM_DELETE_WINDOW", on_closing)
    app.after(100, poll_log_queue)
    app.mainloop()


def _browse_folder(app: ctk.CTk, entry_widget: Any) -> None:
    """Let the user pick a directory and write it into the entry."""
    path = ctk.filedialog.askdirectory(parent=app, title="Select Directory")
    if path:
        entry_widget.delete(0, "end")
        entry_widget.insert(0, path)


if __name__ == "__main__":
    main()
