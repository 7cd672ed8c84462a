"""Open/save file pickers exposed as commands.

Both use cases block the calling task until the dialog closes. A confirmed
selection is remembered as the starting directory of the next dialog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from typing import Optional, Tuple

from ..domain.file_filters import OPEN_FILTERS, SAVE_FILTERS, FileFilter
from ..domain.ports import DialogPort, FilePath
from ..viewmodels.settings_vm import SettingsVM
from .error_mapping import map_dialog_error

_LOG = logging.getLogger(__name__)


def _initial_dir(settings: Optional[SettingsVM]) -> Optional[str]:
    if settings is None:
        return None
    candidate = settings.last_directory
    if candidate and os.path.isdir(candidate):
        return candidate
    return None


def _remember(settings: Optional[SettingsVM], path: Optional[FilePath]) -> None:
    if settings is None or not path:
        return
    parent = os.path.dirname(os.path.abspath(path))
    if parent:
        settings.last_directory = parent


@dataclass
class OpenFileDialog:
    """Ask the user for an existing file. Returns ``None`` on cancel."""

    dialog: DialogPort
    settings: Optional[SettingsVM] = None
    filters: Tuple[FileFilter, ...] = field(default=OPEN_FILTERS)
    title: str = "Open File"

    def __call__(self) -> Optional[FilePath]:
        try:
            path = self.dialog.pick_open(
                self.filters, title=self.title, initial_dir=_initial_dir(self.settings)
            )
        except Exception as exc:
            _LOG.warning("Open dialog failed: %s", exc)
            raise map_dialog_error(exc) from exc
        _remember(self.settings, path)
        return path


@dataclass
class SaveFileDialog:
    """Ask the user for a save target. Never writes the file itself."""

    dialog: DialogPort
    settings: Optional[SettingsVM] = None
    filters: Tuple[FileFilter, ...] = field(default=SAVE_FILTERS)
    title: str = "Save File"

    def __call__(self) -> Optional[FilePath]:
        try:
            path = self.dialog.pick_save(
                self.filters, title=self.title, initial_dir=_initial_dir(self.settings)
            )
        except Exception as exc:
            _LOG.warning("Save dialog failed: %s", exc)
            raise map_dialog_error(exc) from exc
        _remember(self.settings, path)
        return path


__all__ = ["OpenFileDialog", "SaveFileDialog"]
