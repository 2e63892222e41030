"""
Logging building blocks for the facade.

Severities, message text construction, layouts, handlers and sinks. The
logger registry lives in ``loggable.logging.manager``.

Limitations:
- Level filtering, I/O and rotation are left to the standard ``logging`` package.
- Structured output includes only timestamp, severity, channel and message.
"""

from loggable.logging.formatters import (
    PatternFormatter,
    StructuredFormatter,
    build_formatter,
)
from loggable.logging.handlers import (
    BufferedHandler,
    SafeFileHandler,
    StderrHandler,
    StdoutHandler,
)
from loggable.logging.levels import Severity, from_level, to_level
from loggable.logging.message import format_message, interpolate
from loggable.logging.sinks import Sink, open_handler

__all__ = [
    "Severity",
    "to_level",
    "from_level",
    "format_message",
    "interpolate",
    "PatternFormatter",
    "StructuredFormatter",
    "build_formatter",
    "BufferedHandler",
    "SafeFileHandler",
    "StdoutHandler",
    "StderrHandler",
    "Sink",
    "open_handler",
]
