import asyncio
import threading

import pytest
import webview

from topaz.adapters.dialog_native import NativeDialogAdapter, first_path, to_webview_file_types
from topaz.domain.file_filters import OPEN_FILTERS, SAVE_FILTERS


class _FakeWindow:
    def __init__(self, result):
        self.result = result
        self.calls = []

    async def create_file_dialog(self, dialog_type, **kwargs):
        self.calls.append((dialog_type, kwargs))
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


@pytest.fixture
def server_loop():
    loop = asyncio.new_event_loop()
    thread = threading.Thread(target=loop.run_forever, daemon=True)
    thread.start()
    yield loop
    loop.call_soon_threadsafe(loop.stop)
    thread.join(timeout=5)
    loop.close()


def test_file_types_render_pywebview_strings():
    assert to_webview_file_types(OPEN_FILTERS) == (
        "Text Files (*.txt;*.md;*.json;*.rs;*.py;*.js;*.ts)",
        "All Files (*.*)",
    )
    assert to_webview_file_types(SAVE_FILTERS) == ("Text Files (*.txt;*.md;*.json)",)


def test_pick_open_returns_first_selected_path(server_loop):
    window = _FakeWindow(("/data/a.md",))
    adapter = NativeDialogAdapter(lambda: window, server_loop)

    path = adapter.pick_open(OPEN_FILTERS, title="Open File", initial_dir="/data")

    assert path == "/data/a.md"
    dialog_type, kwargs = window.calls[0]
    assert dialog_type == webview.FileDialog.OPEN
    assert kwargs["directory"] == "/data"
    assert kwargs["allow_multiple"] is False


def test_pick_save_accepts_plain_string(server_loop):
    window = _FakeWindow("/data/out.txt")
    adapter = NativeDialogAdapter(lambda: window, server_loop)

    assert adapter.pick_save(SAVE_FILTERS, title="Save File") == "/data/out.txt"
    assert window.calls[0][0] == webview.FileDialog.SAVE
    assert window.calls[0][1]["directory"] == ""


def test_cancel_returns_none(server_loop):
    adapter = NativeDialogAdapter(lambda: _FakeWindow(None), server_loop)

    assert adapter.pick_open(OPEN_FILTERS, title="Open File") is None


def test_missing_window_raises(server_loop):
    adapter = NativeDialogAdapter(lambda: None, server_loop)

    with pytest.raises(RuntimeError, match="not available"):
        adapter.pick_open(OPEN_FILTERS, title="Open File")


def test_dialog_failure_propagates(server_loop):
    adapter = NativeDialogAdapter(lambda: _FakeWindow(OSError("gtk failed")), server_loop)

    with pytest.raises(OSError, match="gtk failed"):
        adapter.pick_save(SAVE_FILTERS, title="Save File")


def test_first_path_handles_empty_sequence():
    assert first_path(()) is None
    assert first_path(["/x"]) == "/x"
