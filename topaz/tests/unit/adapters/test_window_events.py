from topaz.adapters.window_events import WindowEvents


def test_emit_without_listener_is_dropped():
    events = WindowEvents()

    assert events.emit("open-file", "/tmp/a.txt") is False


def test_emit_delivers_payload_to_listener():
    received = []
    events = WindowEvents()
    events.listen("open-file", received.append)

    assert events.emit("open-file", "/tmp/a.txt") is True
    assert received == ["/tmp/a.txt"]


def test_emit_goes_through_deliver_hook():
    queued = []
    received = []
    events = WindowEvents(deliver=queued.append)
    events.listen("open-file", received.append)

    events.emit("open-file", "/tmp/a.txt")

    assert received == []
    queued[0]()
    assert received == ["/tmp/a.txt"]
