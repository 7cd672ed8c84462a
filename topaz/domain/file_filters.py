"""File type filters offered by the open and save dialogs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

ALL_FILES = "*"


@dataclass(frozen=True)
class FileFilter:
    """A labelled set of file extensions (without the leading dot).

    The single extension ``"*"`` matches every file.
    """

    label: str
    extensions: Tuple[str, ...]

    @property
    def matches_all(self) -> bool:
        return ALL_FILES in self.extensions

    def patterns(self) -> Tuple[str, ...]:
        """Return glob patterns such as ``("*.txt", "*.md")``."""
        if self.matches_all:
            return ("*",)
        return tuple(f"*.{ext}" for ext in self.extensions)


OPEN_FILTERS: Tuple[FileFilter, ...] = (
    FileFilter("Text Files", ("txt", "md", "json", "rs", "py", "js", "ts")),
    FileFilter("All Files", (ALL_FILES,)),
)

SAVE_FILTERS: Tuple[FileFilter, ...] = (
    FileFilter("Text Files", ("txt", "md", "json")),
)

__all__ = ["ALL_FILES", "FileFilter", "OPEN_FILTERS", "SAVE_FILTERS"]
