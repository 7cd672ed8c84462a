"""Shared visual theme for the Topaz desktop views.

The module centralizes ttk style tokens and the editor pane colors so the
window renders the light "topaz" look without styling logic in the views.
"""

from __future__ import annotations

import tkinter as tk
from tkinter import ttk
from typing import Any, Dict

BG = "#ffffff"
BG_SECONDARY = "#f6f8fa"
BORDER = "#d0d7de"
TEXT = "#1f2328"
MUTED = "#656d76"
ACCENT = "#0066cc"
# rgba(0, 102, 204, 0.2) flattened onto white
SELECTION = "#cce0f5"


def apply_topaz_theme(root: tk.Misc) -> None:
    """Apply the ttk + tk theme to the full application.

    Args:
        root: Root Tk object or any widget tied to the app Tcl interpreter.
    """
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")

    root.option_add("*Font", "TkDefaultFont 10")
    root.configure(bg=BG_SECONDARY)

    style.configure(".", background=BG_SECONDARY, foreground=TEXT)
    style.configure("TFrame", background=BG_SECONDARY)
    style.configure("Editor.TFrame", background=BG, bordercolor=BORDER, relief="solid", borderwidth=1)
    style.configure("TLabel", background=BG_SECONDARY, foreground=TEXT)
    style.configure("Status.TLabel", background=BG_SECONDARY, foreground=MUTED)

    style.configure(
        "TButton",
        padding=(10, 6),
        background=BG,
        bordercolor=BORDER,
        relief="flat",
    )
    style.map("TButton", background=[("active", "#eaf2fb")])
    style.configure("Primary.TButton", background=ACCENT, foreground="#ffffff", bordercolor=ACCENT)
    style.map("Primary.TButton", background=[("active", "#0052a3")])

    style.configure("Vertical.TScrollbar", background=BG_SECONDARY, troughcolor=BG, bordercolor=BORDER)


def editor_text_options() -> Dict[str, Any]:
    """Options for the editor ``tk.Text`` widget (monospace, roomy lines)."""
    return {
        "font": ("TkFixedFont", 11),
        "background": BG,
        "foreground": TEXT,
        "insertbackground": ACCENT,
        "insertwidth": 2,
        "selectbackground": SELECTION,
        "selectforeground": TEXT,
        "inactiveselectbackground": SELECTION,
        "relief": "flat",
        "borderwidth": 0,
        "highlightthickness": 0,
        "padx": 24,
        "pady": 20,
        "spacing1": 3,
        "spacing3": 3,
        "wrap": "word",
        "undo": False,
    }
