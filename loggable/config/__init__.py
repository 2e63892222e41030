"""
Configuration module for loggable.

This module provides:
- LoggingConfig: process-wide settings for layouts, default prefixes and levels.
- get_config: Factory loading the settings from the environment.

Example environment variables (to be placed in your project's .env or environment):

LOGGABLE_LAYOUT_PATTERN="%(severity)5s %(channel)s%(message)s"
LOGGABLE_DATE_PATTERN="%Y-%m-%dT%H:%M:%S.%L"
LOGGABLE_LAYOUT_STYLE="pattern"  # Options: pattern, structured
LOGGABLE_DEFAULT_APPLICATION="Ingest"
LOGGABLE_DEFAULT_SUBJECT="batch-42"
LOGGABLE_DEFAULT_LEVEL="INFO"
LOGGABLE_ROOT_NAME="loggable.channels"
LOGGABLE_PER_INSTANCE_NAMES=false
LOGGABLE_PROPAGATE=false
"""

from .base import DEFAULT_DATE_PATTERN, DEFAULT_LAYOUT_PATTERN, LoggingConfig
from .settings import get_config

__all__ = [
    "LoggingConfig",
    "get_config",
    "DEFAULT_LAYOUT_PATTERN",
    "DEFAULT_DATE_PATTERN",
]
