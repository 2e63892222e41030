"""
Layouts for log sinks.

Two layouts are available:
- PatternFormatter renders a single text line from a %-style pattern, e.g.
  ``D, [2024-05-01T10:00:00.123 #4242.1400] DEBUG -- Worker : message``.
- StructuredFormatter renders one JSON object per line with timestamp,
  severity, channel and message.

Both expose the record attributes ``severity`` (DEBUG, INFO, WARN, ERROR,
FATAL), ``severity_initial`` and ``channel`` to patterns.
"""

import json
import logging
from datetime import datetime
from typing import Any, Optional, Union

from loggable.logging.levels import from_level

STRUCTURED_LAYOUTS = ("structured", "json")


def _annotate(record: logging.LogRecord) -> None:
    severity = from_level(record.levelno)
    record.severity = severity.name
    record.severity_initial = severity.initial
    if not getattr(record, "channel", None):
        record.channel = record.name


class PatternFormatter(logging.Formatter):
    """
    Format log records from a %-style pattern.

    Timestamps are rendered with ``datetime.strftime``; the extra directive
    ``%L`` stands for zero-padded milliseconds.
    """

    def __init__(self, pattern: str, date_pattern: Optional[str] = None):
        super().__init__(fmt=pattern, datefmt=date_pattern)

    def format(self, record: logging.LogRecord) -> str:
        _annotate(record)
        return super().format(record)

    def formatTime(
        self, record: logging.LogRecord, datefmt: Optional[str] = None
    ) -> str:
        moment = datetime.fromtimestamp(record.created)
        if not datefmt:
            return moment.isoformat(timespec="milliseconds")
        return moment.strftime(datefmt.replace("%L", f"{int(record.msecs):03d}"))


class StructuredFormatter(logging.Formatter):
    """
    Format log records as JSON for structured logging.

    Only timestamp, severity, channel and message are included. Exception
    information, when present, is added under ``exception``.
    """

    def format(self, record: logging.LogRecord) -> str:
        """
        Format the specified record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON string containing the formatted log record
        """
        _annotate(record)
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "severity": record.severity,
            "channel": record.channel,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data)


def build_formatter(
    layout: Union[None, str, logging.Formatter], config: Any
) -> logging.Formatter:
    """
    Resolve a layout specification to a formatter.

    Args:
        layout: None for the configured default, "pattern", "structured"
            (or "json"), any other string as a pattern, or a ready formatter
        config: Settings providing LAYOUT_PATTERN, DATE_PATTERN and LAYOUT_STYLE

    Returns:
        A formatter instance
    """
    if isinstance(layout, logging.Formatter):
        return layout
    if layout is None:
        layout = config.LAYOUT_STYLE
    if layout in STRUCTURED_LAYOUTS:
        return StructuredFormatter()
    if layout == "pattern":
        return PatternFormatter(config.LAYOUT_PATTERN, config.DATE_PATTERN)
    return PatternFormatter(layout, config.DATE_PATTERN)
