"""Logging setup exports."""

from .log_setup import PACKAGE_LOGGER_NAME, configure_logging, get_run_logger

__all__ = ["PACKAGE_LOGGER_NAME", "configure_logging", "get_run_logger"]
