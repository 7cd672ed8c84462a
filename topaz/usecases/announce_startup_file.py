"""Forward a command-line file path to the main window once.

The desktop runtimes call this right after the main window exists. When
``argv[1]`` names an existing path an ``open-file`` event carrying the
resolved path is emitted. Delivery is best effort: if no window is listening
the event is lost and never retried.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
import os
from pathlib import Path
from typing import Optional, Sequence

from ..domain.ports import EventPort

OPEN_FILE_EVENT = "open-file"

_LOG = logging.getLogger(__name__)


def startup_path(argv: Sequence[str]) -> Optional[Path]:
    """Return the first positional argument as a path, if any."""
    if len(argv) > 1 and argv[1]:
        return Path(argv[1])
    return None


@dataclass
class AnnounceStartupFile:
    events: EventPort
    _done: bool = field(default=False, init=False, repr=False)

    def __call__(self, argv: Sequence[str]) -> Optional[str]:
        """Emit ``open-file`` at most once per instance.

        Returns:
            The resolved path that was handed to the window, else ``None``.
        """
        if self._done:
            return None
        self._done = True

        path = startup_path(argv)
        if path is None:
            return None
        # os.path.exists reports False for unreadable or over-long paths too.
        if not os.path.exists(path):
            _LOG.info("Ignoring startup path %s: does not exist", path)
            return None

        resolved = str(path.resolve())
        if not self.events.emit(OPEN_FILE_EVENT, resolved):
            return None
        _LOG.debug("Announced startup file %s", resolved)
        return resolved


__all__ = ["AnnounceStartupFile", "OPEN_FILE_EVENT", "startup_path"]
