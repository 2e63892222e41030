"""
Logger registry for the facade.

The registry resolves names to logger handles, attaches sinks to the backend
loggers and holds the configuration all of this is done with. Backend loggers
live under ``config.ROOT_NAME``, e.g. ``loggable.channels.billing.Invoice``.

A module-level default registry is created on first use; ``configure`` replaces
it with one built from explicit settings.
"""

import logging
import weakref
from typing import Any, Dict, List, Optional, Union

from loggable.config.base import LoggingConfig
from loggable.config.settings import get_config
from loggable.logging.formatters import build_formatter
from loggable.logging.levels import Severity, SeverityLike, to_level
from loggable.logging.sinks import Sink, open_handler

logger = logging.getLogger(__name__)

# Separates a class-derived name from its per-instance suffix
INSTANCE_SEPARATOR = "#"

Layout = Union[None, str, logging.Formatter]


class LoggerHandle(logging.LoggerAdapter):
    """
    A named logging channel.

    Wraps the backend logger for a class and tags every record with the
    handle's ``channel``, which includes the per-instance suffix when there is
    one. Handles are created by LoggerRegistry.get_logger.
    """

    def __init__(
        self,
        backend: logging.Logger,
        channel: str,
        registry: "LoggerRegistry",
        key: Optional[str] = None,
    ):
        super().__init__(backend, {"channel": channel})
        self.channel = channel
        self.registry = registry
        self.key = key

    def process(self, msg, kwargs):
        extra = dict(self.extra)
        extra.update(kwargs.get("extra") or {})
        kwargs["extra"] = extra
        return msg, kwargs

    def write(self, severity: SeverityLike, text: str) -> None:
        """Write already formatted text at the given severity."""
        self.log(to_level(severity), text)

    def add_sink(
        self,
        destination: Any,
        level: SeverityLike = Severity.DEBUG,
        layout: Layout = None,
    ) -> Sink:
        """Attach a sink to the backend logger behind this handle."""
        return self.registry.add_sink(destination, level, layout, name=self.key)

    @property
    def sinks(self) -> List[Sink]:
        return self.registry.sinks(self.key)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.channel}>"


class LoggerRegistry:
    """
    Resolves and caches logger handles and owns the sinks attached to them.

    Handles are cached weakly by name: a handle stays cached while something
    (usually the object it was created for) holds on to it.

    Example:
        ```python
        registry = LoggerRegistry(LoggingConfig(DEFAULT_LEVEL="INFO"))
        registry.add_sink("stderr", level="ERROR")
        registry.get_logger("jobs.Importer").write("INFO", " : started")
        ```
    """

    def __init__(self, config: Optional[LoggingConfig] = None):
        self.config = config if config is not None else get_config()
        self._handles: "weakref.WeakValueDictionary[str, LoggerHandle]" = (
            weakref.WeakValueDictionary()
        )
        self._sinks: Dict[str, List[Sink]] = {}

        self.root = logging.getLogger(self.config.ROOT_NAME)
        self.root.setLevel(to_level(self.config.DEFAULT_LEVEL))
        self.root.propagate = self.config.PROPAGATE

    def _backend(self, name: Optional[str]) -> logging.Logger:
        if not name:
            return self.root
        base = name.split(INSTANCE_SEPARATOR, 1)[0]
        return logging.getLogger(f"{self.config.ROOT_NAME}.{base}")

    def get_logger(self, name: Optional[str] = None) -> LoggerHandle:
        """
        Get the handle for a name, creating it on first use.

        When this registry has attached no sink to the backend logger or to
        the registry root yet, a default stdout sink with the configured layout
        is attached to the root. Handlers installed by other code (dictConfig,
        test log capture) don't count as sinks.

        Args:
            name: Channel name, usually a qualified class name optionally
                followed by ``#<instance id>``; None for the root channel

        Returns:
            The cached or newly created handle
        """
        channel = name or self.config.ROOT_NAME
        handle = self._handles.get(channel)
        if handle is not None:
            return handle

        backend = self._backend(name)
        if not self._sinks.get(backend.name) and not self._sinks.get(self.root.name):
            self.add_sink("stdout", level=self.config.DEFAULT_LEVEL)

        handle = LoggerHandle(backend, channel, self, key=name or None)
        self._handles[channel] = handle
        return handle

    def add_sink(
        self,
        destination: Any,
        level: SeverityLike = Severity.DEBUG,
        layout: Layout = None,
        name: Optional[str] = None,
    ) -> Sink:
        """
        Attach an output sink.

        Args:
            destination: "stdout", "stderr", a file path, a writable stream
                or a logging.Handler
            level: Minimum severity written to the sink
            layout: Layout name, pattern or formatter; None for the configured one
            name: Channel whose backend logger gets the sink; None for the
                registry root, which every channel reaches

        Returns:
            The attached sink

        Raises:
            SinkUnavailableError: If the destination cannot be opened
            UnknownSeverityError: If the level is not a known severity
        """
        severity = Severity.parse(level)
        handler, description, owned = open_handler(destination)
        handler.setLevel(to_level(severity))
        if layout is not None or handler.formatter is None:
            handler.setFormatter(build_formatter(layout, self.config))

        backend = self._backend(name)
        backend.addHandler(handler)

        sink = Sink(description, severity, handler, owned)
        self._sinks.setdefault(backend.name, []).append(sink)
        logger.debug(
            "Attached sink %s at %s to %s", description, severity.name, backend.name
        )
        return sink

    def sinks(self, name: Optional[str] = None) -> List[Sink]:
        """List the sinks attached to the backend logger of a channel."""
        return list(self._sinks.get(self._backend(name).name, []))

    def remove_sink(self, sink: Sink) -> None:
        """Detach a sink and close it if it was opened by this registry."""
        for backend_name, sinks in self._sinks.items():
            if sink in sinks:
                sinks.remove(sink)
                logging.getLogger(backend_name).removeHandler(sink.handler)
                sink.close()
                logger.debug("Detached sink %s from %s", sink.destination, backend_name)
                return
        raise ValueError(f"Sink {sink.destination!r} is not attached to this registry")

    def reset(self) -> None:
        """Detach every sink attached through this registry and forget all handles."""
        for backend_name, sinks in self._sinks.items():
            backend = logging.getLogger(backend_name)
            for sink in sinks:
                backend.removeHandler(sink.handler)
                sink.close()
        self._sinks.clear()
        self._handles.clear()
        logger.debug("Reset logger registry %s", self.config.ROOT_NAME)

    def set_level(self, level: SeverityLike) -> None:
        """Change the minimum severity passed on by the registry root."""
        severity = Severity.parse(level)
        self.config.DEFAULT_LEVEL = severity
        self.root.setLevel(to_level(severity))

    def set_application(self, name: Optional[str] = None) -> None:
        self.config.set_application(name)

    def set_subject(self, name: Optional[str] = None) -> None:
        self.config.set_subject(name)


# Module-level default registry
registry: Optional[LoggerRegistry] = None


def get_registry() -> LoggerRegistry:
    """
    Get the default registry, creating it from the environment on first use.
    """
    global registry
    if registry is None:
        registry = LoggerRegistry()
    return registry


def configure(config: Optional[LoggingConfig] = None, **overrides) -> LoggerRegistry:
    """
    Replace the default registry.

    The previous default registry is reset, detaching the sinks it attached.

    Args:
        config: Settings for the new registry; loaded from the environment if omitted
        **overrides: Setting values taking precedence over ``config``

    Returns:
        The new default registry

    Example:
        ```python
        configure(DEFAULT_APPLICATION="Importer", DEFAULT_LEVEL="INFO")
        ```
    """
    global registry
    if config is None:
        config = get_config(**overrides)
    elif overrides:
        config = get_config(**{**config.model_dump(), **overrides})

    if registry is not None:
        registry.reset()
    registry = LoggerRegistry(config)
    return registry


def reset_registry() -> None:
    """Reset and drop the default registry; the next use creates a new one."""
    global registry
    if registry is not None:
        registry.reset()
    registry = None


def get_logger(name: Optional[str] = None) -> LoggerHandle:
    """Get a handle from the default registry."""
    return get_registry().get_logger(name)
