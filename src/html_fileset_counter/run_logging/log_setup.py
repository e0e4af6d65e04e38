"""Console logging bootstrap."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "html_fileset_counter"


def configure_logging(level: int = logging.INFO, console: Console | None = None) -> logging.Logger:
    """Attach a rich console handler to the package logger at the given level.

    Previously attached handlers are closed and replaced so repeated CLI
    invocations in one process do not duplicate output. Records keep
    propagating to the root logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = RichHandler(
        console=console or Console(stderr=True, soft_wrap=True),
        show_path=False,
        show_time=False,
        markup=False,
    )
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(console_handler)
    return logger


def get_run_logger() -> logging.Logger:
    """Return the logger used for run progress lines."""
    return logging.getLogger(f"{PACKAGE_LOGGER_NAME}.run")
