from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from alloy_hover.observability.logging import (
    ROOT_LOGGER_NAME,
    configure_logging,
    get_logger,
    resolve_level,
)


def test_get_logger_is_cached() -> None:
    assert get_logger("alloy_hover.test") is get_logger("alloy_hover.test")
    assert get_logger().name == ROOT_LOGGER_NAME


def test_resolve_level_names() -> None:
    assert resolve_level("debug") == logging.DEBUG
    assert resolve_level("WARN") == logging.WARNING
    assert resolve_level("warning") == logging.WARNING
    assert resolve_level("error") == logging.ERROR
    assert resolve_level(None) == logging.INFO
    assert resolve_level("bogus") == logging.INFO


def test_configure_logging_writes_child_loggers_to_stream() -> None:
    stream = io.StringIO()
    configure_logging("debug", stream=stream)
    get_logger("alloy_hover.lsp.state").debug("Opened %s", "file:///a")
    output = stream.getvalue()
    assert "alloy_hover.lsp.state - DEBUG - Opened file:///a" in output


def test_configure_logging_filters_below_level() -> None:
    stream = io.StringIO()
    configure_logging("warn", stream=stream)
    get_logger("alloy_hover.dictionary").info("hidden")
    get_logger("alloy_hover.dictionary").warning("shown")
    output = stream.getvalue()
    assert "hidden" not in output
    assert "shown" in output


def test_reconfiguring_replaces_handler() -> None:
    first = io.StringIO()
    second = io.StringIO()
    configure_logging("info", stream=first)
    logger = configure_logging("info", stream=second)
    assert len(logger.handlers) == 1
    get_logger("alloy_hover").info("only once")
    assert first.getvalue() == ""
    assert second.getvalue().count("only once") == 1


def test_log_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "hover.log"
    logger = configure_logging("info", log_file)
    get_logger("alloy_hover.cli").info("to file")
    for handler in logger.handlers:
        handler.flush()
    assert "to file" in log_file.read_text(encoding="utf-8")
    configure_logging("info", stream=io.StringIO())


def test_unopenable_log_file_keeps_current_handler(tmp_path: Path) -> None:
    stream = io.StringIO()
    configure_logging("info", stream=stream)
    with pytest.raises(OSError):
        configure_logging("debug", tmp_path / "missing" / "hover.log")
    logger = get_logger()
    assert logger.level == logging.INFO
    logger.info("still here")
    assert "still here" in stream.getvalue()
