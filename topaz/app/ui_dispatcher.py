"""Marshal callables onto the Tk UI thread and hand back one-shot futures.

Worker tasks (command invocations) must not touch Tk directly. They pass a
callable to :meth:`UiDispatcher.call`, which queues it for the UI thread and
returns a :class:`concurrent.futures.Future` that resolves exactly once with
the callable's value or exception. A periodic Tk ``after`` pump drains the
queue. Calls made on the UI thread itself run inline.
"""

from __future__ import annotations

from concurrent.futures import Future
import logging
import queue
import threading
from typing import Any, Callable, Optional, Tuple


ScheduleFn = Callable[[int, Callable[[], None]], str]

_LOG = logging.getLogger(__name__)


def _run_into(fn: Callable[[], Any], future: Future) -> None:
    if not future.set_running_or_notify_cancel():
        return
    try:
        result = fn()
    except Exception as exc:
        future.set_exception(exc)
    else:
        future.set_result(result)


class UiDispatcher:
    """Queue work for the UI thread using a Tk-compatible ``after`` function."""

    def __init__(
        self,
        schedule: ScheduleFn,
        *,
        interval_ms: int = 25,
        ui_thread: Optional[threading.Thread] = None,
    ) -> None:
        """Store the scheduler and remember which thread owns the UI.

        Args:
            schedule: Function compatible with ``after(delay_ms, callback)``.
            interval_ms: Pump period in milliseconds.
            ui_thread: Thread that runs the Tk main loop (defaults to the
                constructing thread).
        """
        self._schedule = schedule
        self._interval_ms = max(1, int(interval_ms))
        self._ui_thread = ui_thread or threading.current_thread()
        self._queue: "queue.Queue[Tuple[Callable[[], Any], Future]]" = queue.Queue()
        self._running = False

    def on_ui_thread(self) -> bool:
        return threading.current_thread() is self._ui_thread

    def call(self, fn: Callable[[], Any]) -> Future:
        """Run ``fn`` on the UI thread and return its single-resolution future."""
        future: Future = Future()
        if self.on_ui_thread():
            _run_into(fn, future)
        else:
            self._queue.put((fn, future))
        return future

    def start(self) -> None:
        """Begin pumping queued callables from the UI thread."""
        if self._running:
            return
        self._running = True
        self._schedule(self._interval_ms, self._tick)

    def stop(self) -> None:
        """Stop pumping and cancel callables that never reached the UI thread."""
        self._running = False
        cancelled = 0
        while True:
            try:
                _fn, future = self._queue.get_nowait()
            except queue.Empty:
                break
            if future.cancel():
                cancelled += 1
        if cancelled:
            _LOG.debug("Cancelled %d pending UI calls on shutdown", cancelled)

    def drain(self) -> int:
        """Run every queued callable now. Must be called on the UI thread."""
        count = 0
        while True:
            try:
                fn, future = self._queue.get_nowait()
            except queue.Empty:
                return count
            _run_into(fn, future)
            count += 1

    def _tick(self) -> None:
        self.drain()
        if self._running:
            self._schedule(self._interval_ms, self._tick)


__all__ = ["ScheduleFn", "UiDispatcher"]
