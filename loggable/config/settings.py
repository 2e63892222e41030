"""
Configuration loading.

Builds the settings instance from the environment. The logger registry calls
this once when it is first needed; applications that want different values
pass their own LoggingConfig to ``loggable.configure`` instead.
"""

from .base import LoggingConfig


def get_config(**overrides) -> LoggingConfig:
    """
    Load the logging configuration.

    Values come from ``LOGGABLE_*`` environment variables and the ``.env``
    file; keyword arguments take precedence over both.

    Returns:
        LoggingConfig: A new settings instance
    """
    return LoggingConfig(**overrides)
