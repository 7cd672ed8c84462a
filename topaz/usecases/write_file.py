from __future__ import annotations
from dataclasses import dataclass
from ..domain.ports import FilePath, FileSystemPort, UseCaseError
from .error_mapping import map_io_error, require_path


@dataclass
class WriteFile:
    files: FileSystemPort

    def __call__(self, path: FilePath, content: str) -> None:
        require_path(path)
        if not isinstance(content, str):
            raise UseCaseError("INVALID_ARGS", f"content must be text, got {type(content).__name__}")
        try:
            self.files.write_text(path, content)
        except (OSError, ValueError) as e:
            raise map_io_error(e, action="write", path=path) from e
