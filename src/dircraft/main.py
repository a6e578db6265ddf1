from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI when arguments are present and to the GUI
otherwise, and installs a global exception hook so fatal crashes are
logged and reported on every interface.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Running this file directly (python src/dircraft/main.py) needs src on the path
_SRC_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _SRC_DIR not in sys.path:
    sys.path.insert(0, _SRC_DIR)


# -----------------------------------------------------------------------------
# UNHANDLED EXCEPTION HOOK
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Last-resort handler installed as sys.excepthook.

    The traceback always goes to the log. CLI runs also get it on stderr;
    GUI runs get a modal error box, or stderr when Tk itself is unusable.
    """
    logging.getLogger("dircraft.supervisor").critical(
        f"Unhandled {exctype.__name__}: {value}", exc_info=(exctype, value, tb)
    )

    details = "".join(traceback.format_exception(exctype, value, tb))
    if len(sys.argv) > 1:
        sys.stderr.write(f"\ndircraft: fatal error\n{details}")
        return

    try:
        import tkinter.messagebox as mb
        from tkinter import Tk

        root = Tk()
        root.withdraw()
        mb.showerror(
            "DirCraft - Fatal Error",
            f"DirCraft stopped unexpectedly:\n\n{value}\n\nSee the log file for the full traceback."
        )
        root.destroy()
    except Exception:
        sys.stderr.write(details)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Delegate to the CLI or the GUI depending on argument presence.

    Returns:
        int: Standard process exit code (0: Success, 1: Error).
    """
    sys.excepthook = global_exception_handler
    try:
        if len(sys.argv) > 1:
            from dircraft.interface.cli.app import main as cli_main
            return cli_main()

        from dircraft.interface.gui.app import main as gui_main
        gui_main()
        return 0

    except Exception as e:
        global_exception_handler(type(e), e, sys.exc_info()[2])
        return 1


if __name__ == "__main__":
    sys.exit(main())
