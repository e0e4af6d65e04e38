"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    RECOGNIZED_OPTIONS,
    ConfigurationError,
    build_run_configuration,
    load_configuration,
)
from .run_settings import CATCH_ALL_PATTERN, RunConfiguration

__all__ = [
    "RunConfiguration",
    "CATCH_ALL_PATTERN",
    "RECOGNIZED_OPTIONS",
    "ConfigurationError",
    "build_run_configuration",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
