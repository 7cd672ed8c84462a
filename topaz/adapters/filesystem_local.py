from __future__ import annotations

import logging

from ..domain.ports import FilePath, FileSystemPort

_ENCODING = "utf-8"


class FileSystemLocal(FileSystemPort):
    """Whole-file UTF-8 text I/O on the local disk.

    Files are opened with ``newline=""`` so line endings pass through
    untouched in both directions. Writes truncate in place; parent
    directories are never created.
    """

    def __init__(self, encoding: str = _ENCODING) -> None:
        self.encoding = encoding
        self._log = logging.getLogger(__name__)

    def read_text(self, path: FilePath) -> str:
        with open(path, "r", encoding=self.encoding, newline="") as fh:
            content = fh.read()
        self._log.debug("Read %d chars from %s", len(content), path)
        return content

    def write_text(self, path: FilePath, content: str) -> None:
        with open(path, "w", encoding=self.encoding, newline="") as fh:
            fh.write(content)
        self._log.debug("Wrote %d chars to %s", len(content), path)
