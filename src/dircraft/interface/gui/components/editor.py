from __future__ import annotations

"""
Structure Editor Frame.

Holds the widgets of a build session: the tree diagram textbox, the
destination entry with its browse button, the confirmation and dry-run
switches and the action buttons. Widgets are exposed as attributes so the
controller can bind commands and read values.
"""

from typing import Any, Dict

import customtkinter as ctk

from dircraft.utils.i18n import i18n


class EditorFrame(ctk.CTkFrame):
    """Input area of the main window."""

    def __init__(self, master: Any, config: Dict[str, Any], **kwargs: Any):
        super().__init__(master, corner_radius=10, **kwargs)
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)

        # --- Structure Input ---
        ctk.CTkLabel(
            self,
            text=i18n.t("gui.editor.structure_label"),
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=("gray40", "gray60")
        ).grid(row=0, column=0, columnspan=2, padx=10, pady=(10, 0), sticky="w")

        self.txt_structure = ctk.CTkTextbox(self, font=("Consolas", 12), wrap="none")
        self.txt_structure.grid(row=1, column=0, columnspan=2, padx=10, pady=10, sticky="nsew")
        self.txt_structure.insert("1.0", config.get("last_structure", ""))

        # --- Destination ---
        ctk.CTkLabel(
            self,
            text=i18n.t("gui.editor.output_label"),
            font=ctk.CTkFont(size=12, weight="bold"),
            text_color=("gray40", "gray60")
        ).grid(row=2, column=0, columnspan=2, padx=10, pady=(5, 0), sticky="w")

        self.entry_output = ctk.CTkEntry(self, placeholder_text="/path/to/output")
        self.entry_output.insert(0, config.get("output_dir", ""))
        self.entry_output.grid(row=3, column=0, padx=10, pady=10, sticky="ew")

        self.btn_browse_out = ctk.CTkButton(self, text=i18n.t("gui.editor.browse"), width=80)
        self.btn_browse_out.grid(row=3, column=1, padx=10, pady=10)

        # --- Options and Actions ---
        frame_actions = ctk.CTkFrame(self, fg_color="transparent")
        frame_actions.grid(row=4, column=0, columnspan=2, sticky="ew", padx=10, pady=(0, 10))

        self.sw_skip_confirmation = ctk.CTkSwitch(
            frame_actions, text=i18n.t("gui.editor.skip_confirmation")
        )
        self.sw_skip_confirmation.pack(side="left", padx=(0, 15))
        if config.get("skip_confirmation"):
            self.sw_skip_confirmation.select()

        self.sw_dry_run = ctk.CTkSwitch(frame_actions, text=i18n.t("gui.editor.dry_run"))
        self.sw_dry_run.pack(side="left")
        if config.get("dry_run"):
            self.sw_dry_run.select()

        self.btn_build = ctk.CTkButton(
            frame_actions,
            text=i18n.t("gui.editor.btn_build"),
            fg_color="#1F6AA5",
            font=ctk.CTkFont(weight="bold"),
        )
        self.btn_build.pack(side="right")

        self.btn_preview = ctk.CTkButton(
            frame_actions,
            text=i18n.t("gui.editor.btn_preview"),
            fg_color="transparent",
            border_width=1,
        )
        self.btn_preview.pack(side="right", padx=10)

    def get_structure(self) -> str:
        return self.txt_structure.get("1.0", "end-1c")
