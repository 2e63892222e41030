"""
Unit tests for the logger registry.

Covers:
- Handle creation, caching and per-instance channels
- Default stdout sink attachment
- Sink attachment, filtering, removal and failure reporting
- The module-level default registry (get_registry, configure, reset_registry)
"""

import gc
import io
import json
import logging

import pytest

from loggable.config.base import LoggingConfig
from loggable.errors import SinkUnavailableError, UnknownSeverityError
from loggable.logging.handlers import BufferedHandler, StdoutHandler
from loggable.logging.levels import Severity
from loggable.logging.manager import (
    LoggerHandle,
    LoggerRegistry,
    configure,
    get_logger,
    get_registry,
    reset_registry,
)


def test_get_logger_returns_cached_handle(registry):
    handle = registry.get_logger("jobs.Worker")
    assert isinstance(handle, LoggerHandle)
    assert registry.get_logger("jobs.Worker") is handle
    assert handle.channel == "jobs.Worker"
    assert handle.logger.name == f"{registry.config.ROOT_NAME}.jobs.Worker"


def test_get_logger_without_name_is_root(registry):
    handle = registry.get_logger()
    assert handle.logger is registry.root
    assert handle.channel == registry.config.ROOT_NAME


def test_instance_channels_share_backend_logger(registry):
    first = registry.get_logger("jobs.Worker#1a")
    second = registry.get_logger("jobs.Worker#2b")
    assert first is not second
    assert first.channel != second.channel
    assert first.logger is second.logger


def test_handles_are_released_when_unreferenced(registry):
    handle = registry.get_logger("jobs.Temporary#ff")
    assert "jobs.Temporary#ff" in registry._handles
    del handle
    gc.collect()
    assert "jobs.Temporary#ff" not in registry._handles


def test_default_stdout_sink_is_attached_once(registry):
    registry.get_logger("jobs.Worker")
    registry.get_logger("jobs.Other")
    sinks = registry.sinks()
    assert len(sinks) == 1
    assert sinks[0].destination == "stdout"
    assert isinstance(sinks[0].handler, StdoutHandler)


def test_no_default_sink_when_one_is_attached(registry):
    sink = registry.add_sink(io.StringIO())
    registry.get_logger("jobs.Worker")
    assert registry.sinks() == [sink]


def test_foreign_handlers_do_not_replace_default_sink(registry, capsys):
    foreign = logging.StreamHandler(io.StringIO())
    registry.root.addHandler(foreign)
    backend = logging.getLogger(f"{registry.config.ROOT_NAME}.jobs.Worker")
    backend.addHandler(foreign)
    try:
        registry.get_logger("jobs.Worker").write("INFO", " -- Worker : message")
    finally:
        registry.root.removeHandler(foreign)
        backend.removeHandler(foreign)

    assert [sink.destination for sink in registry.sinks()] == ["stdout"]
    assert "INFO -- Worker : message" in capsys.readouterr().out


def test_handle_writes_to_stdout(registry, capsys):
    registry.get_logger("jobs.Worker").write(Severity.DEBUG, " -- Worker : message")
    out = capsys.readouterr().out
    assert out.startswith("D, [")
    assert out.endswith("DEBUG -- Worker : message\n")


def test_records_carry_channel(registry):
    buffered = BufferedHandler()
    registry.add_sink(buffered)
    registry.get_logger("jobs.Worker#1a").write("INFO", "text")
    record = buffered.get_records()[0]
    assert record.channel == "jobs.Worker#1a"
    assert record.levelno == logging.INFO


def test_sinks_filter_by_level(registry):
    stream_a, stream_b = io.StringIO(), io.StringIO()
    registry.add_sink(stream_a, level="DEBUG")
    registry.add_sink(stream_b, level="ERROR")
    handle = registry.get_logger("jobs.Worker")

    handle.write("ERROR", " : broken")
    assert "broken" in stream_a.getvalue()
    assert "broken" in stream_b.getvalue()

    handle.write("DEBUG", " : detail")
    assert "detail" in stream_a.getvalue()
    assert "detail" not in stream_b.getvalue()


def test_named_sink_only_receives_its_channel(registry):
    stream = io.StringIO()
    registry.add_sink(io.StringIO())
    sink = registry.add_sink(stream, name="jobs.Worker")
    assert registry.sinks("jobs.Worker") == [sink]
    assert registry.sinks("jobs.Worker#1a") == [sink]

    registry.get_logger("jobs.Other").write("INFO", " : other")
    registry.get_logger("jobs.Worker").write("INFO", " : mine")
    assert stream.getvalue().count("\n") == 1
    assert "mine" in stream.getvalue()


def test_handle_add_sink_targets_its_backend(registry):
    handle = registry.get_logger("jobs.Worker#1a")
    sink = handle.add_sink(io.StringIO(), level="WARN")
    assert handle.sinks == [sink]
    assert sink.level is Severity.WARN
    assert sink.handler in handle.logger.handlers


def test_add_sink_with_structured_layout(registry):
    stream = io.StringIO()
    registry.add_sink(stream, layout="structured")
    registry.get_logger("jobs.Worker").write("WARN", " : careful")
    data = json.loads(stream.getvalue().splitlines()[0])
    assert data["severity"] == "WARN"
    assert data["channel"] == "jobs.Worker"
    assert data["message"] == " : careful"


def test_add_sink_keeps_formatter_of_given_handler(registry):
    handler = logging.StreamHandler(io.StringIO())
    formatter = logging.Formatter("%(message)s")
    handler.setFormatter(formatter)
    sink = registry.add_sink(handler, level="INFO")
    assert sink.handler.formatter is formatter
    assert sink.owned is False
    assert handler.level == logging.INFO


def test_add_sink_unavailable_destination(registry, tmp_path):
    with pytest.raises(SinkUnavailableError):
        registry.add_sink(tmp_path)
    assert registry.sinks() == []


def test_add_sink_unknown_level(registry):
    with pytest.raises(UnknownSeverityError):
        registry.add_sink(io.StringIO(), level="TRACE")
    assert registry.sinks() == []


def test_remove_sink(registry):
    stream = io.StringIO()
    sink = registry.add_sink(stream)
    registry.remove_sink(sink)
    assert registry.sinks() == []
    assert sink.handler not in registry.root.handlers
    with pytest.raises(ValueError):
        registry.remove_sink(sink)


def test_reset_detaches_everything(registry):
    root_sink = registry.add_sink(io.StringIO())
    handle = registry.get_logger("jobs.Worker")
    channel_sink = handle.add_sink(io.StringIO())

    registry.reset()

    assert root_sink.handler not in registry.root.handlers
    assert channel_sink.handler not in handle.logger.handlers
    assert registry.sinks() == []
    assert registry.get_logger("jobs.Worker") is not handle


def test_set_level_filters_messages(registry):
    stream = io.StringIO()
    registry.add_sink(stream)
    registry.set_level("WARN")
    handle = registry.get_logger("jobs.Worker")
    handle.write("INFO", " : quiet")
    handle.write("ERROR", " : loud")
    assert "quiet" not in stream.getvalue()
    assert "loud" in stream.getvalue()
    assert registry.config.DEFAULT_LEVEL is Severity.WARN


def test_default_level_applies_to_root():
    config = LoggingConfig(ROOT_NAME="loggable.tests.level", DEFAULT_LEVEL="error")
    registry = LoggerRegistry(config)
    try:
        assert registry.root.level == logging.ERROR
        assert registry.root.propagate is False
    finally:
        registry.reset()


def test_set_application_delegates_to_config(registry):
    registry.set_application("   ")
    assert registry.config.DEFAULT_APPLICATION is None
    registry.set_application("Importer")
    registry.set_subject("batch-7")
    assert registry.config.DEFAULT_APPLICATION == "Importer"
    assert registry.config.DEFAULT_SUBJECT == "batch-7"


def test_get_registry_is_created_once():
    reset_registry()
    assert get_registry() is get_registry()


def test_configure_replaces_default_registry(config):
    first = configure(config)
    assert get_registry() is first
    first.add_sink(io.StringIO())

    second = configure(config)
    assert get_registry() is second
    assert first.sinks() == []


def test_configure_with_overrides(config):
    registry = configure(config, DEFAULT_APPLICATION="Importer", DEFAULT_LEVEL="info")
    assert registry.config.DEFAULT_APPLICATION == "Importer"
    assert registry.config.DEFAULT_LEVEL is Severity.INFO
    assert registry.config.ROOT_NAME == config.ROOT_NAME


def test_module_get_logger_uses_default_registry(config):
    registry = configure(config)
    assert get_logger("jobs.Worker") is registry.get_logger("jobs.Worker")


def test_reset_registry_drops_default(config):
    registry = configure(config)
    registry.add_sink(io.StringIO())
    reset_registry()
    assert registry.sinks() == []
    assert get_registry() is not registry
