"""
MainWindowView
---------------
Tkinter main window of the Topaz editor shell.
This file contains **only View code**: no file I/O, no dialogs. It exposes
callback hooks that are connected by ``topaz.app.main.App``.

- The window provides:
  * Toolbar with Open / Save / Save As
  * A plain text pane with a vertical scrollbar
  * StatusBar at the bottom with transient toasts
"""
from __future__ import annotations
import tkinter as tk
from tkinter import ttk
from typing import Callable, Optional

from .theme import editor_text_options


class MainWindowView(tk.Tk):
    """Top-level application window (UI-only)."""

    OnVoid = Optional[Callable[[], None]]

    TOAST_MS = 4000

    def __init__(
        self,
        *,
        on_open: OnVoid = None,
        on_save: OnVoid = None,
        on_save_as: OnVoid = None,
        on_modified: OnVoid = None,
        on_close: OnVoid = None,
    ) -> None:
        super().__init__()

        self.title("Topaz")
        self.minsize(480, 320)

        self._on_open = on_open
        self._on_save = on_save
        self._on_save_as = on_save_as
        self._on_modified = on_modified
        self._on_close = on_close
        self._toast_token: Optional[str] = None

        # ---- 3 rows: Toolbar, Editor, Status ----
        self.rowconfigure(1, weight=1)
        self.columnconfigure(0, weight=1)

        self._build_toolbar(self)
        self._build_editor(self)
        self._build_statusbar(self)

        self.bind("<Control-o>", lambda e: self._fire(self._on_open))
        self.bind("<Control-s>", lambda e: self._fire(self._on_save))
        self.bind("<Control-S>", lambda e: self._fire(self._on_save_as))
        self.protocol("WM_DELETE_WINDOW", self._handle_close)

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def _build_toolbar(self, parent: tk.Misc) -> None:
        toolbar = ttk.Frame(parent)
        toolbar.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))

        ttk.Button(toolbar, text="Open", command=lambda: self._fire(self._on_open)).grid(
            row=0, column=0, padx=(0, 6)
        )
        ttk.Button(
            toolbar, text="Save", style="Primary.TButton", command=lambda: self._fire(self._on_save)
        ).grid(row=0, column=1, padx=6)
        ttk.Button(toolbar, text="Save As", command=lambda: self._fire(self._on_save_as)).grid(
            row=0, column=2, padx=6
        )

    def _build_editor(self, parent: tk.Misc) -> None:
        frame = ttk.Frame(parent, style="Editor.TFrame")
        frame.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        frame.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)

        self.text = tk.Text(frame, **editor_text_options())
        self.text.grid(row=0, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(frame, orient="vertical", command=self.text.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        self.text.configure(yscrollcommand=scroll.set)
        self.text.bind("<<Modified>>", self._handle_modified)

    def _build_statusbar(self, parent: tk.Misc) -> None:
        bar = ttk.Frame(parent)
        bar.grid(row=2, column=0, sticky="ew", padx=8, pady=(0, 6))
        bar.columnconfigure(0, weight=1)
        self.status_path = ttk.Label(bar, text="", style="Status.TLabel")
        self.status_path.grid(row=0, column=0, sticky="w")
        self.status_toast = ttk.Label(bar, text="", style="Status.TLabel")
        self.status_toast.grid(row=0, column=1, sticky="e")

    # ------------------------------------------------------------------
    # Public API used by the presenter
    # ------------------------------------------------------------------
    def get_text(self) -> str:
        return self.text.get("1.0", "end-1c")

    def set_text(self, content: str) -> None:
        self.text.delete("1.0", "end")
        self.text.insert("1.0", content)
        self.text.mark_set("insert", "1.0")
        self.text.see("1.0")
        self.mark_clean()

    def mark_clean(self) -> None:
        self.text.edit_modified(False)

    def set_document(self, title: str, path: Optional[str]) -> None:
        self.title(title)
        self.status_path.configure(text=path or "")

    def show_toast(self, message: str) -> None:
        self.status_toast.configure(text=message)
        if self._toast_token is not None:
            self.after_cancel(self._toast_token)
        self._toast_token = self.after(self.TOAST_MS, self._clear_toast)

    # ------------------------------------------------------------------
    def _clear_toast(self) -> None:
        self._toast_token = None
        self.status_toast.configure(text="")

    def _handle_modified(self, _event: tk.Event) -> None:
        # <<Modified>> also fires when the flag is reset; only report edits.
        if self.text.edit_modified():
            self._fire(self._on_modified)

    def _handle_close(self) -> None:
        if self._on_close:
            self._on_close()
        else:
            self.destroy()

    @staticmethod
    def _fire(callback: "MainWindowView.OnVoid") -> None:
        if callback:
            callback()
