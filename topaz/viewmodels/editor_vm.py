"""Document state shown by the editor window.

Tracks which file the buffer belongs to and whether it changed since the last
read or write. Holds no text and performs no I/O.
"""

from __future__ import annotations

import os
from typing import Callable, Optional

APP_TITLE = "Topaz"


class EditorVM:
    def __init__(self, *, on_changed: Optional[Callable[[], None]] = None) -> None:
        self.path: Optional[str] = None
        self.dirty: bool = False
        self.on_changed = on_changed

    @property
    def file_name(self) -> str:
        if not self.path:
            return "Untitled"
        return os.path.basename(self.path) or self.path

    def title(self) -> str:
        marker = "*" if self.dirty else ""
        return f"{marker}{self.file_name} - {APP_TITLE}"

    def loaded(self, path: str) -> None:
        """Buffer now mirrors ``path`` on disk."""
        self.path = path
        self.dirty = False
        self._notify()

    def saved(self, path: str) -> None:
        self.loaded(path)

    def mark_dirty(self) -> None:
        if self.dirty:
            return
        self.dirty = True
        self._notify()

    def reset(self) -> None:
        self.path = None
        self.dirty = False
        self._notify()

    def _notify(self) -> None:
        if self.on_changed:
            self.on_changed()
