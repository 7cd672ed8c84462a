# topaz/app/main.py
from __future__ import annotations
import argparse
import logging
import sys
import tkinter as tk
from concurrent.futures import Future
from typing import Any, Callable, List, Optional, Sequence

# ---- Views (UI-only) ----
from .views.main_window import MainWindowView
from .views.theme import apply_topaz_theme

# ---- ViewModels ----
from ..viewmodels.editor_vm import EditorVM
from ..viewmodels.settings_vm import SettingsVM

# ---- UseCases & Adapters ----
from ..adapters.dialog_tk import TkDialogAdapter
from ..adapters.storage_local import StorageLocal
from ..adapters.window_events import WindowEvents
from ..domain.ports import UseCaseError
from ..usecases.announce_startup_file import OPEN_FILE_EVENT
from ..utils import logging as logging_utils
from .controller import (
    OPEN_FILE_DIALOG,
    READ_FILE,
    SAVE_FILE_DIALOG,
    WRITE_FILE,
    AppController,
)
from .ui_dispatcher import UiDispatcher


class App:
    """Bootstrap: wire the main window to the command surface."""

    def __init__(self, argv: Sequence[str], *, storage: Optional[StorageLocal] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.argv = list(argv)
        self.storage = storage or StorageLocal()

        # ---- ViewModels ----
        self.settings_vm = SettingsVM()
        self._load_settings()
        self.editor_vm = EditorVM(on_changed=self._refresh_document)

        # ---- Window ----
        self.win = MainWindowView(
            on_open=self._on_open,
            on_save=self._on_save,
            on_save_as=self._on_save_as,
            on_modified=self.editor_vm.mark_dirty,
            on_close=self._on_close,
        )
        apply_topaz_theme(self.win)
        self.win.geometry(self.settings_vm.window_geometry)

        # ---- Adapters & commands ----
        self.dispatcher = UiDispatcher(self.win.after)
        self.events = WindowEvents(self.dispatcher.call)
        self.controller = AppController(
            self.settings_vm,
            dialog=TkDialogAdapter(self.dispatcher, parent=self.win),
            events=self.events,
        )
        self.commands = self.controller.build_command_surface()
        self.events.listen(OPEN_FILE_EVENT, self._load_path)
        self._refresh_document()

    def run(self) -> None:
        self.dispatcher.start()
        self.controller.uc_announce(self.argv)
        self.win.mainloop()

    # ------------------------------------------------------------------
    # Settings
    # ------------------------------------------------------------------
    def _load_settings(self) -> None:
        payload = self.storage.load_user_settings()
        if not payload:
            return
        try:
            self.settings_vm.apply_dict(payload)
        except ValueError as exc:
            self._log.warning("Ignoring stored settings: %s", exc)
            return
        logging_utils.apply_preferences(self.settings_vm.debug_logging)

    def _save_settings(self) -> None:
        try:
            self.settings_vm.window_geometry = self.win.winfo_geometry()
        except (tk.TclError, ValueError) as exc:
            self._log.debug("Keeping stored geometry: %s", exc)
        try:
            self.storage.save_user_settings(self.settings_vm.to_dict())
        except OSError as exc:
            self._log.warning("Could not persist settings: %s", exc)

    # ------------------------------------------------------------------
    # Command plumbing
    # ------------------------------------------------------------------
    def _run(self, name: str, on_done: Callable[[Any], None], **kwargs: Any) -> None:
        """Submit a command and deliver its outcome back on the UI thread."""
        future = self.commands.submit(name, **kwargs)
        future.add_done_callback(
            lambda f: self.dispatcher.call(lambda: self._deliver(name, f, on_done))
        )

    def _deliver(self, name: str, future: Future, on_done: Callable[[Any], None]) -> None:
        try:
            value = future.result()
        except UseCaseError as exc:
            self._log.debug("%s failed: %s", name, exc.message)
            self.win.show_toast(exc.message)
            return
        on_done(value)

    # ------------------------------------------------------------------
    # Toolbar actions
    # ------------------------------------------------------------------
    def _on_open(self) -> None:
        self._run(OPEN_FILE_DIALOG, lambda path: path and self._load_path(path))

    def _on_save(self) -> None:
        if self.editor_vm.path:
            self._write_to(self.editor_vm.path)
        else:
            self._on_save_as()

    def _on_save_as(self) -> None:
        self._run(SAVE_FILE_DIALOG, lambda path: path and self._write_to(path))

    def _on_close(self) -> None:
        self._save_settings()
        self.dispatcher.stop()
        self.commands.shutdown()
        self.win.destroy()

    # ------------------------------------------------------------------
    def _load_path(self, path: str) -> None:
        def shown(content: str) -> None:
            self.win.set_text(content)
            self.editor_vm.loaded(path)

        self._run(READ_FILE, shown, path=path)

    def _write_to(self, path: str) -> None:
        def written(_result: None) -> None:
            self.win.mark_clean()
            self.editor_vm.saved(path)
            self.win.show_toast(f"Saved {self.editor_vm.file_name}")

        self._run(WRITE_FILE, written, path=path, content=self.win.get_text())

    def _refresh_document(self) -> None:
        win = getattr(self, "win", None)
        if win is not None:
            win.set_document(self.editor_vm.title(), self.editor_vm.path)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="topaz", description="Topaz text editor.")
    parser.add_argument("path", nargs="?", help="file to open on startup")
    parser.add_argument("--log-level", default=None, help="root log level (default INFO)")
    parser.add_argument("--config-dir", default=None, help="directory holding user_settings.json")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging_utils.configure_root(args.log_level)
    app = App(
        [sys.argv[0]] + ([args.path] if args.path else []),
        storage=StorageLocal(args.config_dir),
    )
    app.run()


if __name__ == "__main__":
    main()
