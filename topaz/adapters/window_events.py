from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Optional

from ..domain.ports import EventPort

EventHandler = Callable[[str], None]
Deliver = Callable[[Callable[[], None]], Any]


def _call_now(fn: Callable[[], None]) -> None:
    fn()


class WindowEvents(EventPort):
    """Deliver named events to handlers registered by the main window.

    ``deliver`` decides where a handler runs (the Tk runtime passes
    ``UiDispatcher.call`` so handlers run on the UI thread). An event with no
    registered handler is dropped; nothing is queued for later delivery.
    """

    def __init__(self, deliver: Optional[Deliver] = None) -> None:
        self._deliver = deliver or _call_now
        self._handlers: Dict[str, EventHandler] = {}
        self._log = logging.getLogger(__name__)

    def listen(self, event: str, handler: EventHandler) -> None:
        self._handlers[event] = handler

    def emit(self, event: str, payload: str) -> bool:
        handler = self._handlers.get(event)
        if handler is None:
            self._log.debug("Dropping %r event: main window not ready", event)
            return False
        self._deliver(lambda: handler(payload))
        return True
