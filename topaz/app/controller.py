"""Use-case wiring for the editor runtimes.

This module owns construction of the use cases behind each command and
registers them on a :class:`~topaz.app.commands.CommandSurface`. Both the Tk
runtime (``topaz.app.main``) and the NiceGUI runtime (``topaz.web_ui.main``)
build one controller with their own dialog and event adapters.
"""

from __future__ import annotations

from typing import Optional

from ..adapters.filesystem_local import FileSystemLocal
from ..domain.ports import DialogPort, EventPort, FileSystemPort
from ..usecases.announce_startup_file import AnnounceStartupFile
from ..usecases.pick_file import OpenFileDialog, SaveFileDialog
from ..usecases.read_file import ReadFile
from ..usecases.write_file import WriteFile
from ..viewmodels.settings_vm import SettingsVM
from .commands import CommandSurface

READ_FILE = "read_file"
WRITE_FILE = "write_file"
OPEN_FILE_DIALOG = "open_file_dialog"
SAVE_FILE_DIALOG = "save_file_dialog"


class AppController:
    """Create use cases from ports and expose them as named commands.

    Call chain:
        A runtime creates one instance, calls ``build_command_surface`` and
        routes every UI action through the returned surface. The startup
        announcement is called directly once the main window exists.
    """

    def __init__(
        self,
        settings_vm: SettingsVM,
        *,
        dialog: DialogPort,
        events: EventPort,
        files: Optional[FileSystemPort] = None,
    ) -> None:
        """Initialize controller with runtime-specific adapters.

        Args:
            settings_vm: Settings state shared with the dialogs (last
                directory).
            dialog: Native file dialog adapter for this runtime.
            events: Sink for window notifications such as ``open-file``.
            files: Filesystem adapter, local disk by default.
        """
        self.settings_vm = settings_vm
        self.files = files or FileSystemLocal()
        self.uc_read = ReadFile(self.files)
        self.uc_write = WriteFile(self.files)
        self.uc_open_dialog = OpenFileDialog(dialog, settings=settings_vm)
        self.uc_save_dialog = SaveFileDialog(dialog, settings=settings_vm)
        self.uc_announce = AnnounceStartupFile(events)

    def build_command_surface(self, *, max_workers: int = 4) -> CommandSurface:
        surface = CommandSurface(max_workers=max_workers)
        surface.register(READ_FILE, self.uc_read)
        surface.register(WRITE_FILE, self.uc_write)
        surface.register(OPEN_FILE_DIALOG, self.uc_open_dialog)
        surface.register(SAVE_FILE_DIALOG, self.uc_save_dialog)
        return surface
