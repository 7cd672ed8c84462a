"""Domain-level error types surfaced to the UI as plain messages.

Both kinds carry a human-readable ``message`` that embeds the underlying OS or
dialog detail. Cancellation of a dialog is never represented here.
"""

from __future__ import annotations

from typing import Optional

from .ports import UseCaseError


class IoError(UseCaseError):
    """Filesystem failure while reading or writing a file.

    ``reason`` narrows the failure (``not_found``, ``permission_denied``,
    ``is_a_directory``, ``encoding`` or ``os_error``) without changing the
    single error kind the UI deals with.
    """

    CODE = "IO_ERROR"

    def __init__(self, message: str, *, reason: str = "os_error", path: Optional[str] = None):
        super().__init__(self.CODE, message)
        self.reason = reason
        self.path = path


class DialogError(UseCaseError):
    """Failure of the native dialog subsystem itself (not cancellation)."""

    CODE = "DIALOG_ERROR"

    def __init__(self, message: str):
        super().__init__(self.CODE, message)


__all__ = ["DialogError", "IoError"]
