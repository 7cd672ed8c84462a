from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import FilePath, FileSystemPort
from .error_mapping import map_io_error, require_path


@dataclass
class ReadFile:
    files: FileSystemPort

    def __call__(self, path: FilePath) -> str:
        require_path(path)
        try:
            return self.files.read_text(path)
        except (OSError, ValueError) as e:
            raise map_io_error(e, action="read", path=path) from e
