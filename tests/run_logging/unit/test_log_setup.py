"""Console logging bootstrap tests."""

from __future__ import annotations

import io
import logging

from html_fileset_counter.run_logging.log_setup import (
    PACKAGE_LOGGER_NAME,
    configure_logging,
    get_run_logger,
)
from rich.console import Console
from rich.logging import RichHandler


def _buffer_console() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=200, force_terminal=False, color_system=None), buffer


def test_configure_logging_attaches_single_rich_handler() -> None:
    console, _buffer = _buffer_console()

    configure_logging(logging.INFO, console=console)
    logger = configure_logging(logging.INFO, console=console)

    assert logger.name == PACKAGE_LOGGER_NAME
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0], RichHandler)


def test_run_logger_writes_info_lines_to_console() -> None:
    console, buffer = _buffer_console()
    configure_logging(logging.INFO, console=console)

    get_run_logger().info("Found file index.html")

    assert "Found file index.html" in buffer.getvalue()


def test_debug_level_enables_debug_on_run_logger() -> None:
    console, _buffer = _buffer_console()

    configure_logging(logging.INFO, console=console)
    assert not get_run_logger().isEnabledFor(logging.DEBUG)

    configure_logging(logging.DEBUG, console=console)
    assert get_run_logger().isEnabledFor(logging.DEBUG)
