"""
Handlers backing the facade's sinks.

This module provides the standard-stream handlers used by default sinks,
a file handler that creates its directory, and an in-memory handler for
collecting recent records.
"""

import logging
import os
import sys
import threading
from typing import List, Optional, TextIO


class StdoutHandler(logging.StreamHandler):
    """
    A stream handler that always writes to the current ``sys.stdout``.

    The stream is looked up on every write, so redirecting ``sys.stdout``
    after the handler was created is honoured.
    """

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:
        return sys.stdout

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} ({logging.getLevelName(self.level)})>"


class StderrHandler(StdoutHandler):
    """A stream handler that always writes to the current ``sys.stderr``."""

    @property
    def stream(self) -> TextIO:
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


class SafeFileHandler(logging.FileHandler):
    """
    A file handler that won't fail if the log directory doesn't exist.

    The file is opened immediately so an unwritable destination is reported
    when the sink is attached rather than on the first record.
    """

    def __init__(
        self,
        filename: str,
        mode: str = "a",
        encoding: Optional[str] = "utf-8",
    ):
        """
        Initialize the safe file handler.

        Args:
            filename: Path to the log file
            mode: File opening mode
            encoding: Character encoding to use

        Raises:
            OSError: If the directory or file cannot be created
        """
        log_dir = os.path.dirname(os.fspath(filename))
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        super().__init__(filename, mode=mode, encoding=encoding, delay=False)


class BufferedHandler(logging.Handler):
    """
    A handler that stores formatted log lines in memory.

    This is useful for showing recent log output in diagnostics or for
    asserting on log output in tests.
    """

    def __init__(
        self,
        capacity: int = 1000,
        level: int = logging.NOTSET,
    ):
        """
        Initialize the buffered handler.

        Args:
            capacity: Maximum number of log records to store
            level: Minimum log level to handle
        """
        super().__init__(level)
        self.capacity = capacity
        self.buffer: List[logging.LogRecord] = []
        self.lines: List[str] = []
        self.lock = threading.RLock()

    def emit(self, record: logging.LogRecord) -> None:
        """
        Store the log record and its formatted line in the buffer.

        Args:
            record: The log record to store
        """
        try:
            line = self.format(record)
        except Exception:
            self.handleError(record)
            return

        with self.lock:
            self.buffer.append(record)
            self.lines.append(line)

            # Trim buffer if it exceeds capacity
            if len(self.buffer) > self.capacity:
                self.buffer = self.buffer[-self.capacity :]
                self.lines = self.lines[-self.capacity :]

    def get_records(self, limit: Optional[int] = None) -> List[logging.LogRecord]:
        """
        Get recent log records from the buffer.

        Args:
            limit: Optional maximum number of records to return

        Returns:
            A list of recent log records, newest first
        """
        with self.lock:
            if limit is None or limit >= len(self.buffer):
                return list(reversed(self.buffer))
            else:
                return list(reversed(self.buffer))[:limit]

    def getvalue(self) -> str:
        """Return the buffered lines joined as they would appear in a stream."""
        with self.lock:
            return "".join(f"{line}\n" for line in self.lines)

    def clear(self) -> None:
        """Clear all log records from the buffer."""
        with self.lock:
            self.buffer = []
            self.lines = []
