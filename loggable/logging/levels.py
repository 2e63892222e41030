"""
Severity levels and their mapping onto the logging backend.

Severities are ordered DEBUG < INFO < WARN < ERROR < FATAL. Their values are
the standard library levels, so a Severity can be handed straight to
``logging.Logger.log`` and compared with ``Handler.level``.
"""

import logging
from enum import IntEnum
from typing import Any, Union

from loggable.errors.exceptions import UnknownSeverityError

# Backend level names that differ from ours
_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


class Severity(IntEnum):
    """
    Enum for the facade's log severities.

    Example:
        ```python
        assert Severity.parse("warning") is Severity.WARN
        assert to_level(Severity.FATAL) == logging.CRITICAL
        ```
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.CRITICAL

    @property
    def initial(self) -> str:
        """First letter of the severity name, as used by compact layouts."""
        return self.name[0]

    @classmethod
    def parse(cls, value: Any) -> "Severity":
        """
        Convert a severity, backend level number or name to a Severity.

        Names are case-insensitive and the backend spellings WARNING and
        CRITICAL are accepted.

        Raises:
            UnknownSeverityError: If the value does not name a severity
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise UnknownSeverityError(value) from None
        if isinstance(value, str):
            key = value.strip().upper()
            key = _ALIASES.get(key, key)
            try:
                return cls[key]
            except KeyError:
                raise UnknownSeverityError(value) from None
        raise UnknownSeverityError(value)


SeverityLike = Union[Severity, int, str]


def to_level(severity: SeverityLike) -> int:
    """
    Map a severity to the backend's numeric level.

    Raises:
        UnknownSeverityError: If the severity is not known
    """
    return int(Severity.parse(severity))


def from_level(levelno: int) -> Severity:
    """Return the highest severity at or below a backend level (DEBUG below that)."""
    found = Severity.DEBUG
    for severity in Severity:
        if severity <= levelno:
            found = severity
    return found
