"""
Exception classes for the logging facade.

All errors raised by loggable derive from LoggableError, which carries a
human-readable message, a short error code and optional details.
"""

from typing import Any, Dict, Optional


class LoggableError(Exception):
    """
    Base exception for all loggable errors.

    Attributes:
        message: Human-readable error message
        code: Error code identifier (default: ERROR)
        details: Additional error details
    """

    def __init__(
        self,
        message: str = "An unexpected logging error occurred",
        code: str = "ERROR",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)


class FormatSubstitutionError(LoggableError):
    """
    Raised when printf-style substitution of arguments into a template fails.

    The message formatter recovers from it by rendering the template and the
    arguments side by side, so callers of the severity methods never see it.
    """

    def __init__(
        self,
        message: str = "Format substitution failed",
        template: Optional[str] = None,
        args: Optional[tuple] = None,
        code: str = "FORMAT_SUBSTITUTION",
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        if template is not None:
            details["template"] = template
        if args is not None:
            details["args"] = args

        super().__init__(message=message, code=code, details=details)


class UnknownSeverityError(LoggableError, ValueError):
    """Raised for a severity that is not one of DEBUG, INFO, WARN, ERROR, FATAL."""

    def __init__(
        self,
        severity: Any = None,
        code: str = "UNKNOWN_SEVERITY",
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        details["severity"] = severity

        super().__init__(
            message=f"Unknown severity: {severity!r}",
            code=code,
            details=details,
        )


class SinkUnavailableError(LoggableError):
    """
    Raised when a sink destination cannot be opened or written to.

    Attributes:
        destination: Description of the destination that failed
    """

    def __init__(
        self,
        destination: Any = None,
        reason: Optional[str] = None,
        code: str = "SINK_UNAVAILABLE",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.destination = destination
        message = f"Sink destination {destination!r} is unavailable"
        if reason:
            message = f"{message}: {reason}"

        details = details or {}
        details["destination"] = destination

        super().__init__(message=message, code=code, details=details)
