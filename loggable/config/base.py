"""
Base configuration module for the logging facade.

This module provides the process-wide settings read by the message formatter,
the layouts and the logger registry. Values can be loaded from environment
variables prefixed with ``LOGGABLE_`` or from a ``.env`` file.

The configuration is meant to be set up once at startup and only read
afterwards. Changing it while other threads are logging is not supported.
"""

from typing import Any, Literal, Optional

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from loggable.logging.levels import Severity

DEFAULT_LAYOUT_PATTERN = (
    "%(severity_initial)s, [%(asctime)s #%(process)d.%(thread)d] "
    "%(severity)5s%(message)s"
)
DEFAULT_DATE_PATTERN = "%Y-%m-%dT%H:%M:%S.%L"


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _is_usable_name(name: Any) -> bool:
    return isinstance(name, str) and bool(name.strip())


class LoggingConfig(BaseSettings):
    """
    Settings for the logging facade.

    Attributes:
        LAYOUT_PATTERN: %-style pattern used by the pattern layout
        DATE_PATTERN: strftime pattern for timestamps, ``%L`` expands to milliseconds
        LAYOUT_STYLE: Layout used by sinks that do not ask for one ("pattern" or "structured")
        DEFAULT_APPLICATION: Application name prefixed to every message
        DEFAULT_SUBJECT: Subject name prefixed to every message
        DEFAULT_LEVEL: Minimum severity passed on by the registry root logger
        ROOT_NAME: Namespace of the backend loggers owned by the registry
        PER_INSTANCE_NAMES: Give each object its own logger channel
        PROPAGATE: Let records reach the Python root logger as well
    """

    LAYOUT_PATTERN: str = Field(
        default=DEFAULT_LAYOUT_PATTERN, description="Pattern layout format string"
    )
    DATE_PATTERN: str = Field(
        default=DEFAULT_DATE_PATTERN, description="Timestamp format for layouts"
    )
    LAYOUT_STYLE: Literal["pattern", "structured"] = Field(
        default="pattern", description="Default layout for new sinks"
    )
    DEFAULT_APPLICATION: Optional[str] = Field(
        default=None, description="Application name used when none is given"
    )
    DEFAULT_SUBJECT: Optional[str] = Field(
        default=None, description="Subject name used when none is given"
    )
    DEFAULT_LEVEL: Severity = Field(
        default=Severity.DEBUG, description="Minimum severity for the root logger"
    )
    ROOT_NAME: str = Field(
        default="loggable.channels", description="Backend logger namespace"
    )
    PER_INSTANCE_NAMES: bool = Field(
        default=False, description="Name loggers per instance instead of per class"
    )
    PROPAGATE: bool = Field(
        default=False, description="Propagate records to the Python root logger"
    )

    @field_validator("DEFAULT_APPLICATION", "DEFAULT_SUBJECT", mode="before")
    def blank_names_are_unset(cls, value):
        """Treat blank application and subject names as not set."""
        return _blank_to_none(value)

    @field_validator("DEFAULT_LEVEL", mode="before")
    def parse_default_level(cls, value):
        """Accept severity names ("warn", "WARNING") and numeric levels."""
        return Severity.parse(value)

    @field_validator("ROOT_NAME", mode="before")
    def validate_root_name(cls, value):
        """
        Ensure the backend namespace is usable as a logger name.
        """
        if not _is_usable_name(value):
            raise ValueError("ROOT_NAME must be a non-blank string")
        return value.strip()

    def set_application(self, name: Optional[str] = None) -> None:
        """Set the default application name. Blank or non-string names are ignored."""
        if not _is_usable_name(name):
            return
        self.DEFAULT_APPLICATION = name.strip()

    def set_subject(self, name: Optional[str] = None) -> None:
        """Set the default subject name. Blank or non-string names are ignored."""
        if not _is_usable_name(name):
            return
        self.DEFAULT_SUBJECT = name.strip()

    model_config = ConfigDict(
        env_prefix="LOGGABLE_", env_file=".env", case_sensitive=True, extra="ignore"
    )
