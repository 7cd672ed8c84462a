from concurrent.futures import Future

import pytest

from topaz.app.commands import CommandSurface
from topaz.domain.errors import IoError
from topaz.domain.ports import UseCaseError


def _surface():
    surface = CommandSurface(max_workers=2)
    surface.register("echo", lambda text: text)
    surface.register("nothing", lambda: None)
    return surface


def test_invoke_by_name():
    surface = _surface()

    assert surface.invoke("echo", text="hi") == "hi"
    assert surface.invoke("nothing") is None
    assert surface.names() == ["echo", "nothing"]


def test_unknown_command():
    with pytest.raises(UseCaseError) as info:
        _surface().invoke("delete_everything")

    assert info.value.code == "UNKNOWN_COMMAND"


@pytest.mark.parametrize("kwargs", [{}, {"text": "a", "extra": 1}, {"txt": "a"}])
def test_invalid_arguments(kwargs):
    with pytest.raises(UseCaseError) as info:
        _surface().invoke("echo", **kwargs)

    assert info.value.code == "INVALID_ARGS"


def test_handler_use_case_error_propagates_unchanged():
    surface = CommandSurface()
    err = IoError("Failed to read file: boom", reason="os_error")

    def failing(path):
        raise err

    surface.register("read_file", failing)

    with pytest.raises(IoError) as info:
        surface.invoke("read_file", path="/x")
    assert info.value is err


def test_unexpected_exception_becomes_command_failed():
    surface = CommandSurface()

    def broken():
        raise KeyError("k")

    surface.register("broken", broken)

    with pytest.raises(UseCaseError) as info:
        surface.invoke("broken")
    assert info.value.code == "COMMAND_FAILED"


def test_duplicate_registration_rejected():
    surface = _surface()

    with pytest.raises(ValueError):
        surface.register("echo", lambda text: text)


def test_submit_resolves_future_with_value_or_error():
    surface = _surface()
    try:
        ok = surface.submit("echo", text="async")
        bad = surface.submit("missing")

        assert isinstance(ok, Future)
        assert ok.result(timeout=5) == "async"
        assert isinstance(bad.exception(timeout=5), UseCaseError)
    finally:
        surface.shutdown()


def test_shutdown_without_submit_is_noop():
    _surface().shutdown()
