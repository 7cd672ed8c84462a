"""Named command registry invoked by the UI front-end.

Each command is an independent callable with keyword arguments and no shared
state. ``invoke`` runs one synchronously; ``submit`` runs it as a task on a
worker pool and returns a future that resolves exactly once. Every failure
reaches the caller as a :class:`~topaz.domain.ports.UseCaseError` whose
``message`` is the string shown to the user.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor
import inspect
import logging
from typing import Any, Callable, Dict, List, Optional

from ..domain.ports import UseCaseError

Handler = Callable[..., Any]

_LOG = logging.getLogger(__name__)


class CommandSurface:
    """Dispatch UI commands by name to registered handlers."""

    def __init__(self, *, max_workers: int = 4) -> None:
        self._handlers: Dict[str, Handler] = {}
        self._signatures: Dict[str, inspect.Signature] = {}
        self._max_workers = max(1, int(max_workers))
        self._executor: Optional[ThreadPoolExecutor] = None

    def register(self, name: str, handler: Handler) -> None:
        if name in self._handlers:
            raise ValueError(f"Command already registered: {name}")
        self._handlers[name] = handler
        self._signatures[name] = inspect.signature(handler)

    def names(self) -> List[str]:
        return sorted(self._handlers)

    def invoke(self, name: str, **kwargs: Any) -> Any:
        """Run command ``name`` in the calling thread.

        Raises:
            UseCaseError: ``UNKNOWN_COMMAND`` / ``INVALID_ARGS`` for bad
                requests, the handler's own error otherwise.
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise UseCaseError("UNKNOWN_COMMAND", f"Unknown command: {name}")
        try:
            self._signatures[name].bind(**kwargs)
        except TypeError as exc:
            raise UseCaseError("INVALID_ARGS", f"Invalid arguments for {name}: {exc}") from exc

        _LOG.debug("invoke %s(%s)", name, ", ".join(sorted(kwargs)))
        try:
            return handler(**kwargs)
        except UseCaseError as exc:
            _LOG.info("%s failed [%s]: %s", name, exc.code, exc.message)
            raise
        except Exception as exc:
            _LOG.exception("%s raised unexpectedly", name)
            raise UseCaseError("COMMAND_FAILED", str(exc) or exc.__class__.__name__) from exc

    def submit(self, name: str, **kwargs: Any) -> Future:
        """Run command ``name`` as an independent task on the worker pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(
                max_workers=self._max_workers, thread_name_prefix="topaz-cmd"
            )
        return self._executor.submit(self.invoke, name, **kwargs)

    def shutdown(self) -> None:
        """Stop accepting tasks. Running commands are left to finish."""
        if self._executor is not None:
            self._executor.shutdown(wait=False)
            self._executor = None


__all__ = ["CommandSurface", "Handler"]
