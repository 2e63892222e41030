"""
loggable - leveled logging methods for any class.

Inherit from Loggable to get debug, info, warn, error and fatal methods that
format the message with application and subject prefixes and write it through
the standard ``logging`` package.

Usage:
    from loggable import Loggable, configure

    configure(DEFAULT_APPLICATION="Importer")

    class Job(Loggable):
        pass

    Job().info("Processed %d files", 12)
"""

__version__ = "0.1.0"

# Public API exports
from loggable.config import LoggingConfig, get_config
from loggable.errors import (
    FormatSubstitutionError,
    LoggableError,
    SinkUnavailableError,
    UnknownSeverityError,
)
from loggable.logging import Severity, Sink, format_message, to_level
from loggable.logging.manager import (
    LoggerHandle,
    LoggerRegistry,
    configure,
    get_logger,
    get_registry,
    reset_registry,
)
from loggable.mixin import Loggable

__all__ = [
    "Loggable",
    "LoggerHandle",
    "LoggerRegistry",
    "LoggingConfig",
    "Severity",
    "Sink",
    "configure",
    "format_message",
    "get_config",
    "get_logger",
    "get_registry",
    "reset_registry",
    "to_level",
    "LoggableError",
    "FormatSubstitutionError",
    "UnknownSeverityError",
    "SinkUnavailableError",
]
