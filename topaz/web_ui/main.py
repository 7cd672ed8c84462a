"""NiceGUI native-window entrypoint for Topaz."""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any, Optional

from nicegui import app, run, ui

from topaz.adapters.storage_local import StorageLocal
from topaz.app.controller import OPEN_FILE_DIALOG, READ_FILE, SAVE_FILE_DIALOG, WRITE_FILE
from topaz.utils import logging as logging_utils
from topaz.viewmodels.editor_vm import EditorVM
from topaz.web_ui.runtime import WebRuntime


def _install_theme() -> None:
    """Install CSS tokens matching the desktop editor theme."""
    ui.add_head_html(
        """
<style>
:root {
  --bg-primary: #ffffff;
  --bg-secondary: #f6f8fa;
  --text-primary: #1f2328;
  --text-muted: #656d76;
  --border: #d0d7de;
  --accent: #0066cc;
  --font-mono: 'JetBrains Mono', 'IBM Plex Mono', monospace;
}
body { background: var(--bg-secondary); color: var(--text-primary); }
.topaz-editor textarea {
  font-family: var(--font-mono);
  font-size: 15px;
  line-height: 1.7;
  caret-color: var(--accent);
  padding: 20px 24px;
}
.topaz-editor textarea::selection { background: rgba(0, 102, 204, 0.2); }
.topaz-status { color: var(--text-muted); font-size: 12px; }
</style>
        """
    )


def _notify_error(message: str) -> None:
    """Render command errors as concise NiceGUI toasts."""
    ui.notify(message, color="negative", close_button="OK")


def _build_ui(runtime: WebRuntime) -> None:
    """Register the NiceGUI page for the runtime."""

    @ui.page("/")
    async def index() -> None:
        _install_theme()
        editor = EditorVM()
        loading = {"active": False}

        async def call(name: str, **kwargs: Any) -> tuple[bool, Any]:
            ok, value, error = await run.io_bound(runtime.execute, name, **kwargs)
            if not ok:
                _notify_error(error or "Unexpected error.")
            return ok, value

        def refresh() -> None:
            ui.page_title(editor.title())
            status.set_text(editor.path or "")

        def on_edit() -> None:
            if not loading["active"]:
                editor.mark_dirty()

        async def open_path(path: str) -> None:
            ok, content = await call(READ_FILE, path=path)
            if not ok:
                return
            loading["active"] = True
            try:
                text.set_value(content)
            finally:
                loading["active"] = False
            editor.loaded(path)

        async def write_to(path: str) -> None:
            ok, _ = await call(WRITE_FILE, path=path, content=text.value or "")
            if ok:
                editor.saved(path)
                ui.notify(f"Saved {editor.file_name}")

        async def on_open() -> None:
            ok, path = await call(OPEN_FILE_DIALOG)
            if ok and path:
                await open_path(path)

        async def on_save_as() -> None:
            ok, path = await call(SAVE_FILE_DIALOG)
            if ok and path:
                await write_to(path)

        async def on_save() -> None:
            if editor.path:
                await write_to(editor.path)
            else:
                await on_save_as()

        with ui.column().classes("w-full q-pa-sm q-gutter-sm"):
            with ui.row().classes("q-gutter-sm"):
                ui.button("Open", on_click=on_open)
                ui.button("Save", on_click=on_save, color="primary")
                ui.button("Save As", on_click=on_save_as)
            text = (
                ui.textarea(on_change=lambda _e: on_edit())
                .props("outlined autogrow borderless")
                .classes("w-full topaz-editor")
            )
            status = ui.label("").classes("topaz-status")

        editor.on_changed = refresh
        refresh()

        runtime.attach_page(lambda path: ui.timer(0.1, lambda: open_path(path), once=True))


def _parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse CLI args for the native web runtime."""
    parser = argparse.ArgumentParser(prog="topaz-web", description="Run Topaz in a native NiceGUI window.")
    parser.add_argument("path", nargs="?", help="file to open on startup")
    parser.add_argument("--log-level", default=None)
    parser.add_argument("--config-dir", default=None)
    parser.add_argument("--port", type=int, default=8731)
    return parser.parse_args(argv)


def main() -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args()
    logging_utils.configure_root(args.log_level)
    runtime = WebRuntime(
        [sys.argv[0]] + ([args.path] if args.path else []),
        window=lambda: app.native.main_window,
        storage=StorageLocal(args.config_dir),
    )
    app.on_startup(lambda: runtime.start(asyncio.get_running_loop()))
    app.on_shutdown(runtime.stop)
    _build_ui(runtime)
    ui.run(
        native=True,
        port=args.port,
        title="Topaz",
        reload=False,
        window_size=(960, 720),
    )


if __name__ == "__main__":
    main()
