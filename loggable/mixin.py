"""
Logging mixin.

Inherit from Loggable and the methods debug, info, warn, error and fatal are
available on the instances. Each takes a message and optional extra arguments;
when extra arguments are given the message is a %-style format specification.

Example:
    ```python
    from loggable import Loggable

    class Importer(Loggable):
        pass

    importer = Importer()
    importer.debug("message")
    importer.warn("message")
    importer.error("huge error: [%d] %s", 1000, "Exit")
    importer.info("Running application: %s", type(importer).__name__)
    ```

produces:

    D, [2024-05-01T10:00:00.123 #4242.1400] DEBUG -- Importer : message
    W, [2024-05-01T10:00:00.124 #4242.1400]  WARN -- Importer : message
    E, [2024-05-01T10:00:00.124 #4242.1400] ERROR -- Importer : huge error: [1000] Exit
    I, [2024-05-01T10:00:00.125 #4242.1400]  INFO -- Importer : Running application: Importer

Override the ``logger`` property to log through a different handle.
"""

from typing import Any, Optional

from loggable.logging.levels import Severity, SeverityLike
from loggable.logging.manager import (
    INSTANCE_SEPARATOR,
    Layout,
    LoggerHandle,
    LoggerRegistry,
    get_registry,
)
from loggable.logging.message import format_message
from loggable.logging.sinks import Sink


class Loggable:
    """
    Mixin adding leveled logging methods to a class.

    Attributes:
        logging_registry: Registry to log through; None for the default registry
        logger_per_instance: Give every instance its own channel; None to
            follow ``PER_INSTANCE_NAMES`` of the registry's configuration
    """

    logging_registry: Optional[LoggerRegistry] = None
    logger_per_instance: Optional[bool] = None

    def _logging_registry(self) -> LoggerRegistry:
        return self.logging_registry or get_registry()

    @property
    def logger_name(self) -> str:
        """Channel name: the qualified class name, plus the instance id if enabled."""
        cls = type(self)
        name = f"{cls.__module__}.{cls.__qualname__}"

        per_instance = self.logger_per_instance
        if per_instance is None:
            per_instance = self._logging_registry().config.PER_INSTANCE_NAMES
        if per_instance:
            name = f"{name}{INSTANCE_SEPARATOR}{id(self):x}"
        return name

    @property
    def logger(self) -> LoggerHandle:
        """
        The handle this object logs through.

        Resolved on first use and kept on the instance for its lifetime.
        """
        registry = self._logging_registry()
        handle = self.__dict__.get("_loggable_handle")
        if handle is None or handle.registry is not registry:
            handle = registry.get_logger(self.logger_name)
            self.__dict__["_loggable_handle"] = handle
        return handle

    def get_logger(self, name: Optional[str] = None) -> LoggerHandle:
        """Get the handle for an explicit channel name (defaults to this object's)."""
        if name is None:
            return self.logger
        return self._logging_registry().get_logger(name)

    def add_sink(
        self,
        destination: Any,
        level: SeverityLike = Severity.DEBUG,
        layout: Layout = None,
    ) -> Sink:
        """
        Attach a sink receiving this class's messages.

        Args:
            destination: "stdout", "stderr", a file path, a writable stream
                or a logging.Handler
            level: Minimum severity written to the sink
            layout: Layout name, pattern or formatter

        Raises:
            SinkUnavailableError: If the destination cannot be opened
        """
        return self.logger.add_sink(destination, level, layout)

    add_appender = add_sink

    def set_application(self, name: Optional[str] = None) -> None:
        """Set the default application name for every Loggable using this registry."""
        self._logging_registry().set_application(name)

    def set_subject(self, name: Optional[str] = None) -> None:
        """Set the default subject name for every Loggable using this registry."""
        self._logging_registry().set_subject(name)

    def message(
        self,
        severity: SeverityLike,
        msg: Any,
        *args: Any,
        application: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """
        Log a message at the given severity.

        If extra arguments are supplied, the message is a format specification
        and the arguments are substituted into it. If that fails, the message
        is written as ``'<msg> - [<args>]'``.

        If no application is given, the configured default application is
        used, and failing that the class name.

        Args:
            severity: Severity of the message
            msg: The message or format specification
            *args: Optional values for the format specification
            application: The application name
            subject: The subject name

        Raises:
            UnknownSeverityError: If the severity is not known
        """
        severity = Severity.parse(severity)
        registry = self._logging_registry()
        text = format_message(
            msg,
            args,
            application=application,
            subject=subject,
            config=registry.config,
            owner=self,
        )
        self.logger.write(severity, text)

    def debug(
        self,
        msg: Any,
        *args: Any,
        application: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """
        Send a debug message to the logger.

        Args:
            msg: The message, or a format specification when args are given
            *args: Optional extra arguments
            application: The application name
            subject: The subject name
        """
        self.message(
            Severity.DEBUG, msg, *args, application=application, subject=subject
        )

    def info(
        self,
        msg: Any,
        *args: Any,
        application: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """Send an info message to the logger (see debug)."""
        self.message(
            Severity.INFO, msg, *args, application=application, subject=subject
        )

    def warn(
        self,
        msg: Any,
        *args: Any,
        application: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """Send a warning message to the logger (see debug)."""
        self.message(
            Severity.WARN, msg, *args, application=application, subject=subject
        )

    warning = warn

    def error(
        self,
        msg: Any,
        *args: Any,
        application: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """Send an error message to the logger (see debug)."""
        self.message(
            Severity.ERROR, msg, *args, application=application, subject=subject
        )

    def fatal(
        self,
        msg: Any,
        *args: Any,
        application: Optional[str] = None,
        subject: Optional[str] = None,
    ) -> None:
        """Send a fatal message to the logger (see debug)."""
        self.message(
            Severity.FATAL, msg, *args, application=application, subject=subject
        )

    fatal_error = fatal
