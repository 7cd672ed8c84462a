"""NiceGUI runtime orchestration for Topaz.

This module composes the same controller and command surface as the Tk
runtime, with pywebview dialogs from NiceGUI native mode. Commands run in
worker threads via ``nicegui.run.io_bound`` so dialogs can block on the
server loop without stalling it.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, List, Optional, Sequence, Tuple

from topaz.adapters.dialog_native import NativeDialogAdapter, WindowProvider
from topaz.adapters.storage_local import StorageLocal
from topaz.adapters.window_events import EventHandler, WindowEvents
from topaz.app.commands import CommandSurface
from topaz.app.controller import AppController
from topaz.domain.ports import UseCaseError
from topaz.usecases.announce_startup_file import OPEN_FILE_EVENT
from topaz.utils import logging as logging_utils
from topaz.viewmodels.settings_vm import SettingsVM


LOGGER = logging.getLogger(__name__)

Outcome = Tuple[bool, Any, Optional[str]]


class WebRuntime:
    """Own settings, controller and commands for the NiceGUI app."""

    def __init__(
        self,
        argv: Sequence[str],
        *,
        window: WindowProvider,
        storage: Optional[StorageLocal] = None,
    ) -> None:
        self.argv: List[str] = list(argv)
        self.storage = storage or StorageLocal()
        self.settings_vm = SettingsVM()
        self.events = WindowEvents()
        self._window = window
        self.controller: Optional[AppController] = None
        self.commands: Optional[CommandSurface] = None
        self._load_settings()

    def start(self, loop: asyncio.AbstractEventLoop) -> None:
        """Build controller/commands bound to the server event loop."""
        if self.commands is not None:
            return
        self.controller = AppController(
            self.settings_vm,
            dialog=NativeDialogAdapter(self._window, loop),
            events=self.events,
        )
        self.commands = self.controller.build_command_surface()
        LOGGER.debug("Commands ready: %s", ", ".join(self.commands.names()))

    def stop(self) -> None:
        if self.commands is not None:
            self.commands.shutdown()
        try:
            self.storage.save_user_settings(self.settings_vm.to_dict())
        except OSError as exc:
            LOGGER.warning("Could not persist settings: %s", exc)

    def attach_page(self, on_open_file: EventHandler) -> Optional[str]:
        """Register the page's ``open-file`` handler and announce argv once."""
        self.events.listen(OPEN_FILE_EVENT, on_open_file)
        if self.controller is None:
            return None
        return self.controller.uc_announce(self.argv)

    def execute(self, name: str, **kwargs: Any) -> Outcome:
        """Invoke a command; return ``(ok, value, error_message)``.

        Blocks the calling thread. Pages call it through ``run.io_bound``.
        """
        if self.commands is None:
            return False, None, "Backend is not ready yet."
        try:
            return True, self.commands.invoke(name, **kwargs), None
        except UseCaseError as exc:
            return False, None, exc.message

    def _load_settings(self) -> None:
        payload = self.storage.load_user_settings()
        if not payload:
            return
        try:
            self.settings_vm.apply_dict(payload)
        except ValueError as exc:
            LOGGER.warning("Ignoring stored settings: %s", exc)
            return
        logging_utils.apply_preferences(self.settings_vm.debug_logging)


__all__ = ["Outcome", "WebRuntime"]
