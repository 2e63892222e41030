"""
Error module for loggable.

Formatting failures are recovered inside the message formatter, unknown
severities fail fast, and sink destinations that cannot be opened are reported
to the caller that attached them.
"""

from loggable.errors.exceptions import (
    FormatSubstitutionError,
    LoggableError,
    SinkUnavailableError,
    UnknownSeverityError,
)

__all__ = [
    "LoggableError",
    "FormatSubstitutionError",
    "UnknownSeverityError",
    "SinkUnavailableError",
]
