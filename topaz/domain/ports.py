from __future__ import annotations
from typing import Dict, Optional, Protocol, Sequence

from .file_filters import FileFilter

FilePath = str


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class FileSystemPort(Protocol):
    """Whole-file text I/O against the local filesystem.

    Implementations raise ``OSError`` / ``UnicodeError`` unchanged; use cases
    translate them into ``IoError``.
    """

    def read_text(self, path: FilePath) -> str: ...
    def write_text(self, path: FilePath, content: str) -> None: ...


class DialogPort(Protocol):
    """Native file-picker dialogs. ``None`` means the user cancelled."""

    def pick_open(
        self,
        filters: Sequence[FileFilter],
        *,
        title: str,
        initial_dir: Optional[str] = None,
    ) -> Optional[FilePath]: ...

    def pick_save(
        self,
        filters: Sequence[FileFilter],
        *,
        title: str,
        initial_dir: Optional[str] = None,
    ) -> Optional[FilePath]: ...


class EventPort(Protocol):
    """Fire-and-forget notifications towards the main UI window.

    Returns ``True`` when the event was handed to a live window.
    """

    def emit(self, event: str, payload: str) -> bool: ...


class StoragePort(Protocol):
    """Persistence for user preferences."""

    def save_user_settings(self, payload: Dict) -> None: ...
    def load_user_settings(self) -> Optional[Dict]: ...
