import os

import pytest

from topaz.adapters.filesystem_local import FileSystemLocal
from topaz.domain.errors import IoError
from topaz.domain.ports import UseCaseError
from topaz.usecases.read_file import ReadFile
from topaz.usecases.write_file import WriteFile


class _ExplodingFiles:
    def __init__(self, exc):
        self.exc = exc

    def read_text(self, path):
        raise self.exc

    def write_text(self, path, content):
        raise self.exc


def test_write_then_read_scenario(tmp_path):
    files = FileSystemLocal()
    path = str(tmp_path / "x.txt")

    assert WriteFile(files)(path, "hello") is None
    assert ReadFile(files)(path) == "hello"


def test_read_missing_file_is_io_error(tmp_path):
    missing = str(tmp_path / "does-not-exist.txt")

    with pytest.raises(IoError) as info:
        ReadFile(FileSystemLocal())(missing)

    err = info.value
    assert err.code == "IO_ERROR"
    assert err.reason == "not_found"
    assert err.path == missing
    assert err.message.startswith("Failed to read file: ")
    assert "No such file or directory" in err.message


def test_write_below_missing_directory_is_io_error(tmp_path):
    target = str(tmp_path / "nope" / "x.txt")

    with pytest.raises(IoError) as info:
        WriteFile(FileSystemLocal())(target, "anything")

    assert info.value.message.startswith("Failed to write file: ")
    assert info.value.reason == "not_found"


def test_read_invalid_text_is_io_error(tmp_path):
    path = tmp_path / "blob.bin"
    path.write_bytes(b"\x80\x81\x82")

    with pytest.raises(IoError) as info:
        ReadFile(FileSystemLocal())(str(path))

    assert info.value.reason == "encoding"
    assert "utf-8" in info.value.message


def test_read_directory_is_io_error(tmp_path):
    with pytest.raises(IoError) as info:
        ReadFile(FileSystemLocal())(str(tmp_path))

    assert info.value.reason in {"is_a_directory", "permission_denied"}


def test_permission_error_maps_reason():
    uc = WriteFile(_ExplodingFiles(PermissionError(13, "Permission denied")))

    with pytest.raises(IoError) as info:
        uc("/etc/locked.txt", "x")

    assert info.value.reason == "permission_denied"
    assert info.value.message == "Failed to write file: Permission denied (os error 13)"


def test_unexpected_errors_are_not_swallowed():
    uc = ReadFile(_ExplodingFiles(KeyError("bug")))

    with pytest.raises(KeyError):
        uc("/tmp/a.txt")


@pytest.mark.parametrize("uc_call", [
    lambda files, path: ReadFile(files)(path),
    lambda files, path: WriteFile(files)(path, "x"),
])
def test_embedded_nul_in_path_is_io_error(tmp_path, uc_call):
    bad = str(tmp_path / "a\0b.txt")

    with pytest.raises(IoError) as info:
        uc_call(FileSystemLocal(), bad)

    assert info.value.reason == "os_error"
    assert "embedded null byte" in info.value.message
    assert info.value.message.startswith("Failed to ")


@pytest.mark.parametrize("bad_path", [3, None, b"/tmp/a.txt", 1.5])
def test_non_text_path_is_rejected_before_io(bad_path):
    with pytest.raises(UseCaseError) as info:
        ReadFile(FileSystemLocal())(bad_path)

    assert info.value.code == "INVALID_ARGS"


def test_file_descriptor_is_not_read_or_closed(tmp_path):
    secret = tmp_path / "secret.txt"
    secret.write_text("secret", encoding="utf-8")
    fd = os.open(secret, os.O_RDONLY)
    try:
        with pytest.raises(UseCaseError) as info:
            ReadFile(FileSystemLocal())(fd)
        assert info.value.code == "INVALID_ARGS"
        os.fstat(fd)
    finally:
        os.close(fd)


def test_write_accepts_pathlike_but_not_non_text_content(tmp_path):
    target = tmp_path / "p.txt"

    WriteFile(FileSystemLocal())(target, "ok")
    assert target.read_text(encoding="utf-8") == "ok"

    with pytest.raises(UseCaseError) as info:
        WriteFile(FileSystemLocal())(str(target), b"bytes")
    assert info.value.code == "INVALID_ARGS"
    assert target.read_text(encoding="utf-8") == "ok"
