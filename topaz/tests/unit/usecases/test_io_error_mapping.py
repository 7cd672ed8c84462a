import errno

from topaz.domain.errors import DialogError, IoError
from topaz.domain.ports import UseCaseError
from topaz.usecases.error_mapping import map_dialog_error, map_io_error


def test_existing_use_case_error_is_passed_through():
    original = UseCaseError("X", "already mapped")

    assert map_io_error(original, action="read") is original
    assert map_dialog_error(original) is original


def test_generic_os_error_keeps_detail():
    err = map_io_error(OSError(errno.ENOSPC, "No space left on device"), action="write", path="/a")

    assert isinstance(err, IoError)
    assert err.reason == "os_error"
    assert err.message == f"Failed to write file: No space left on device (os error {errno.ENOSPC})"


def test_enoent_oserror_is_not_found():
    err = map_io_error(OSError(errno.ENOENT, "No such file or directory"), action="read")

    assert err.reason == "not_found"


def test_os_error_without_strerror_uses_text():
    err = map_io_error(OSError("disk went away"), action="read")

    assert err.message == "Failed to read file: disk went away"


def test_dialog_error_falls_back_to_class_name():
    err = map_dialog_error(RuntimeError())

    assert isinstance(err, DialogError)
    assert err.message == "Dialog error: RuntimeError"
