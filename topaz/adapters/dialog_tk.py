"""Tk native file dialogs behind :class:`~topaz.domain.ports.DialogPort`.

Tk dialogs are modal and must run on the UI thread. Each pick is handed to the
UI dispatcher and the calling task blocks on the returned future until the
user confirms or cancels. There is no timeout.
"""

from __future__ import annotations

from concurrent.futures import CancelledError
import logging
import os
from tkinter import filedialog
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from ..app.ui_dispatcher import UiDispatcher
from ..domain.file_filters import FileFilter
from ..domain.ports import DialogPort, FilePath

AskFn = Callable[..., Any]


def to_tk_filetypes(filters: Sequence[FileFilter]) -> List[Tuple[str, Any]]:
    """Convert filters into the ``filetypes`` shape Tk expects."""
    filetypes: List[Tuple[str, Any]] = []
    for item in filters:
        if item.matches_all:
            filetypes.append((item.label, "*"))
        else:
            filetypes.append((item.label, item.patterns()))
    return filetypes


def normalize_selection(selected: Any) -> Optional[FilePath]:
    """Tk reports cancel as ``""`` or ``()`` depending on platform."""
    if not selected:
        return None
    if isinstance(selected, (tuple, list)):
        selected = selected[0]
    return os.fspath(selected)


class TkDialogAdapter(DialogPort):
    """Open/save pickers using ``tkinter.filedialog`` on the UI thread."""

    def __init__(
        self,
        dispatcher: UiDispatcher,
        *,
        parent: Any = None,
        ask_open: AskFn = filedialog.askopenfilename,
        ask_save: AskFn = filedialog.asksaveasfilename,
    ) -> None:
        self._dispatcher = dispatcher
        self.parent = parent
        self._ask_open = ask_open
        self._ask_save = ask_save
        self._log = logging.getLogger(__name__)

    def pick_open(
        self,
        filters: Sequence[FileFilter],
        *,
        title: str,
        initial_dir: Optional[str] = None,
    ) -> Optional[FilePath]:
        return self._pick(self._ask_open, filters, title, initial_dir)

    def pick_save(
        self,
        filters: Sequence[FileFilter],
        *,
        title: str,
        initial_dir: Optional[str] = None,
    ) -> Optional[FilePath]:
        return self._pick(self._ask_save, filters, title, initial_dir)

    def _pick(
        self,
        ask: AskFn,
        filters: Sequence[FileFilter],
        title: str,
        initial_dir: Optional[str],
    ) -> Optional[FilePath]:
        options: Dict[str, Any] = {"filetypes": to_tk_filetypes(filters), "title": title}
        if self.parent is not None:
            options["parent"] = self.parent
        if initial_dir:
            options["initialdir"] = initial_dir

        future = self._dispatcher.call(lambda: ask(**options))
        try:
            selected = future.result()
        except CancelledError as exc:
            raise RuntimeError("window closed before the dialog could open") from exc
        path = normalize_selection(selected)
        self._log.debug("%s -> %s", title, path or "<cancelled>")
        return path
