from __future__ import annotations

"""
Main Application Window Factory.

Creates the root CustomTkinter window and its two-row grid: the structure
editor on top and the log console below.
"""

from typing import Any, Dict

import customtkinter as ctk

from dircraft.domain import constants as const


def create_main_window(app_settings: Dict[str, Any]) -> ctk.CTk:
    """
    Instantiate and configure the primary application window.

    Args:
        app_settings: Persisted global settings (theme).

    Returns:
        ctk.CTk: The configured root application instance.
    """
    ctk.set_appearance_mode(app_settings.get("theme", "System"))
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title(f"{const.APP_NAME} - v{const.CURRENT_CONFIG_VERSION}")
    app.geometry("900x720")

    app.grid_columnconfigure(0, weight=1)
    app.grid_rowconfigure(0, weight=3)
    app.grid_rowconfigure(1, weight=1)

    return app
