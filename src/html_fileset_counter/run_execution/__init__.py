"""Run execution domain exports."""

from .html_count_use_case import (
    HTML_SUFFIX,
    RunCancelledError,
    RunExecutionError,
    count_html_files,
    execute_html_count_run,
    log_configuration,
)
from .run_contracts import RunLog, RunResult

__all__ = [
    "HTML_SUFFIX",
    "RunLog",
    "RunResult",
    "RunExecutionError",
    "RunCancelledError",
    "count_html_files",
    "execute_html_count_run",
    "log_configuration",
]
