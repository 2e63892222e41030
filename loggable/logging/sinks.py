"""
Output sinks.

A sink is a backend handler plus the minimum severity it admits. Sinks are
opened from a destination:

- ``"stdout"`` / ``"stderr"``: the process's standard streams
- a path (``str`` or ``os.PathLike``): a file, appended to
- a writable text stream, e.g. ``io.StringIO`` or an open file
- a ``logging.Handler``, used as is
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, Tuple

from loggable.errors.exceptions import SinkUnavailableError
from loggable.logging.handlers import SafeFileHandler, StderrHandler, StdoutHandler
from loggable.logging.levels import Severity, SeverityLike

STANDARD_STREAMS = {
    "stdout": StdoutHandler,
    "stderr": StderrHandler,
}


@dataclass
class Sink:
    """
    An attached output destination.

    Attributes:
        destination: Printable description of where records go
        level: Minimum severity written to this sink
        handler: Backend handler doing the writing
        owned: Whether the handler was opened here and must be closed on detach
    """

    destination: str
    level: Severity
    handler: logging.Handler
    owned: bool = True

    def admits(self, severity: SeverityLike) -> bool:
        """Return True if a message of the given severity reaches this sink."""
        return Severity.parse(severity) >= self.level

    def close(self) -> None:
        if self.owned:
            self.handler.close()


def _check_stream(stream: Any) -> None:
    if getattr(stream, "closed", False):
        raise SinkUnavailableError(stream, "stream is closed")
    writable = getattr(stream, "writable", None)
    if callable(writable) and not writable():
        raise SinkUnavailableError(stream, "stream is not writable")


def open_handler(destination: Any) -> Tuple[logging.Handler, str, bool]:
    """
    Open the backend handler for a destination.

    Returns:
        The handler, a description of the destination and whether the
        handler is owned by the caller

    Raises:
        SinkUnavailableError: If the destination cannot be opened
    """
    if isinstance(destination, logging.Handler):
        return destination, repr(destination), False

    if isinstance(destination, str) and destination in STANDARD_STREAMS:
        return STANDARD_STREAMS[destination](), destination, True

    if isinstance(destination, (str, os.PathLike)):
        path = os.fspath(destination)
        try:
            handler = SafeFileHandler(path)
        except OSError as exc:
            raise SinkUnavailableError(path, str(exc)) from exc
        return handler, path, True

    if callable(getattr(destination, "write", None)):
        _check_stream(destination)
        name = getattr(destination, "name", None) or type(destination).__name__
        # Closing a StreamHandler leaves the caller's stream open
        return logging.StreamHandler(destination), str(name), True

    raise SinkUnavailableError(destination, "unsupported destination type")
