from __future__ import annotations

"""
Log Console Frame.

Read-only view of the build progress. Lines arrive from the log queue
polled by the main loop; the buffer is capped so long sessions do not grow
the widget without bound.
"""

from typing import Any

import customtkinter as ctk

from dircraft.utils.i18n import i18n

# Oldest lines are dropped past this size
MAX_CONSOLE_LINES = 2000


class LogsFrame(ctk.CTkFrame):
    """Progress console with copy and clear actions."""

    def __init__(self, master: Any, **kwargs: Any):
        super().__init__(master, corner_radius=10, **kwargs)
        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

        header = ctk.CTkFrame(self, fg_color="transparent")
        header.grid(row=0, column=0, sticky="ew", padx=10, pady=(8, 0))

        ctk.CTkLabel(
            header,
            text=i18n.t("gui.logs.title"),
            font=ctk.CTkFont(size=12, weight="bold"),
        ).pack(side="left")
        ctk.CTkButton(
            header, text=i18n.t("gui.logs.clear"), width=70, command=self.clear
        ).pack(side="right")
        ctk.CTkButton(
            header, text=i18n.t("gui.logs.copy"), width=70, command=self.copy_to_clipboard
        ).pack(side="right", padx=(0, 6))

        self.console = ctk.CTkTextbox(self, font=("Consolas", 10), wrap="none")
        self.console.grid(row=1, column=0, sticky="nsew", padx=10, pady=10)
        self.console.configure(state="disabled")
        self._line_count = 0

    def append_log(self, msg: str) -> None:
        self.console.configure(state="normal")
        self.console.insert("end", f"{msg}\n")
        self._line_count += 1
        if self._line_count > MAX_CONSOLE_LINES:
            overflow = self._line_count - MAX_CONSOLE_LINES
            self.console.delete("1.0", f"{overflow + 1}.0")
            self._line_count = MAX_CONSOLE_LINES
        self.console.see("end")
        self.console.configure(state="disabled")

    def clear(self) -> None:
        self.console.configure(state="normal")
        self.console.delete("1.0", "end")
        self.console.configure(state="disabled")
        self._line_count = 0

    def copy_to_clipboard(self) -> None:
        content = self.console.get("1.0", "end-1c")
        self.clipboard_clear()
        self.clipboard_append(content)
