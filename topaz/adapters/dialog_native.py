"""Native-mode NiceGUI (pywebview) file dialogs behind ``DialogPort``.

NiceGUI exposes the pywebview window as ``app.native.main_window`` whose
``create_file_dialog`` is awaitable on the server event loop. Use cases run in
worker threads, so each pick is submitted with
``asyncio.run_coroutine_threadsafe`` and the worker blocks on that one-shot
future until the dialog closes.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any, Callable, Optional, Sequence, Tuple

import webview

from ..domain.file_filters import FileFilter
from ..domain.ports import DialogPort, FilePath

WindowProvider = Callable[[], Any]


def to_webview_file_types(filters: Sequence[FileFilter]) -> Tuple[str, ...]:
    """Render filters as pywebview strings, e.g. ``"Text Files (*.txt;*.md)"``."""
    rendered = []
    for item in filters:
        if item.matches_all:
            rendered.append(f"{item.label} (*.*)")
        else:
            rendered.append(f"{item.label} ({';'.join(item.patterns())})")
    return tuple(rendered)


def first_path(selected: Any) -> Optional[FilePath]:
    """pywebview returns ``None``, a string, or a sequence of strings."""
    if not selected:
        return None
    if isinstance(selected, (str, os.PathLike)):
        return os.fspath(selected)
    return os.fspath(selected[0])


class NativeDialogAdapter(DialogPort):
    """Pickers rendered by the pywebview window of a native NiceGUI app."""

    def __init__(self, window: WindowProvider, loop: asyncio.AbstractEventLoop) -> None:
        """Bind the adapter to the native window and the server loop.

        Args:
            window: Callable returning the current window proxy (or ``None``
                before the native window exists).
            loop: Event loop that owns the window proxy.
        """
        self._window = window
        self._loop = loop
        self._log = logging.getLogger(__name__)

    def pick_open(
        self,
        filters: Sequence[FileFilter],
        *,
        title: str,
        initial_dir: Optional[str] = None,
    ) -> Optional[FilePath]:
        return self._pick(webview.FileDialog.OPEN, filters, title, initial_dir)

    def pick_save(
        self,
        filters: Sequence[FileFilter],
        *,
        title: str,
        initial_dir: Optional[str] = None,
    ) -> Optional[FilePath]:
        return self._pick(webview.FileDialog.SAVE, filters, title, initial_dir)

    def _pick(
        self,
        dialog_type: Any,
        filters: Sequence[FileFilter],
        title: str,
        initial_dir: Optional[str],
    ) -> Optional[FilePath]:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is self._loop:
            raise RuntimeError("native dialogs must be requested from a worker thread")

        window = self._window()
        if window is None:
            raise RuntimeError("native window is not available")

        async def _ask() -> Any:
            return await window.create_file_dialog(
                dialog_type,
                directory=initial_dir or "",
                allow_multiple=False,
                file_types=to_webview_file_types(filters),
            )

        future = asyncio.run_coroutine_threadsafe(_ask(), self._loop)
        path = first_path(future.result())
        self._log.debug("%s -> %s", title, path or "<cancelled>")
        return path
