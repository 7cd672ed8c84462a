"""Translate filesystem and dialog exceptions into user-facing errors."""

from __future__ import annotations

import errno
import os
from typing import Any, Optional

from topaz.domain.errors import DialogError, IoError
from topaz.domain.ports import UseCaseError


def map_io_error(exc: Exception, *, action: str, path: Optional[str] = None) -> UseCaseError:
    """Map an ``OSError``/``ValueError`` raised by a filesystem adapter.

    ``ValueError`` covers undecodable text and paths the OS cannot take
    (embedded NUL).

    Args:
        exc: Exception raised by the adapter.
        action: Verb used in the message, ``"read"`` or ``"write"``.
        path: Path the operation targeted.

    Returns:
        ``IoError`` whose message embeds the OS detail, or ``exc`` itself
        when it already is a ``UseCaseError``.
    """
    if isinstance(exc, UseCaseError):
        return exc
    message = f"Failed to {action} file: {_describe(exc)}"
    return IoError(message, reason=_reason_for(exc), path=path)


def map_dialog_error(exc: Exception) -> UseCaseError:
    """Map a dialog subsystem failure. Cancellation never reaches here."""
    if isinstance(exc, UseCaseError):
        return exc
    return DialogError(f"Dialog error: {_describe(exc)}")


def _reason_for(exc: Exception) -> str:
    if isinstance(exc, UnicodeError):
        return "encoding"
    if isinstance(exc, FileNotFoundError):
        return "not_found"
    if isinstance(exc, PermissionError):
        return "permission_denied"
    if isinstance(exc, IsADirectoryError):
        return "is_a_directory"
    if isinstance(exc, OSError) and exc.errno == errno.ENOENT:
        return "not_found"
    return "os_error"


def _describe(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        # Leave the filename out; the UI already knows which path it asked for.
        if exc.errno is not None:
            return f"{exc.strerror} (os error {exc.errno})"
        return exc.strerror
    text = str(exc).strip()
    return text or exc.__class__.__name__


def require_path(path: Any) -> None:
    """Reject anything but a text path before it reaches ``open()``.

    Raises:
        UseCaseError: ``INVALID_ARGS`` for ints (file descriptors), bytes,
            ``None`` and other non-path values.
    """
    if isinstance(path, str) or (isinstance(path, os.PathLike) and isinstance(os.fspath(path), str)):
        return
    raise UseCaseError("INVALID_ARGS", f"path must be text, got {type(path).__name__}")


__all__ = ["map_dialog_error", "map_io_error", "require_path"]
