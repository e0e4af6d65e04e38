"""Run execution use-case service."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from html_fileset_counter.configuration.run_settings import RunConfiguration
from html_fileset_counter.fileset_scanning import enumerate_included_files

from .run_contracts import RunLog, RunResult

HTML_SUFFIX = "html"
CONFIGURATION_BANNER = "html-fileset-counter configuration:"

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a run use case cannot be completed."""


class RunCancelledError(RunExecutionError):
    """Raised when a run is cancelled between enumeration and reporting."""


def execute_html_count_run(
    configuration: RunConfiguration,
    *,
    log: RunLog | None = None,
    cancel_event: threading.Event | None = None,
) -> RunResult:
    """Scan the configured fileset and count the files whose path ends with ``html``.

    Raises:
      InvalidDirectoryError: If the source directory cannot be scanned.
      RunCancelledError: If ``cancel_event`` is set once enumeration finishes.
    """
    run_log: RunLog = log or _LOGGER

    if configuration.verbose or run_log.isEnabledFor(logging.DEBUG):
        log_configuration(configuration, run_log)

    if configuration.skip:
        run_log.info("Skipping file formatting")
        return RunResult(processed_count=0, skipped=True)

    matched_files = enumerate_included_files(
        configuration.source_directory.absolute(),
        configuration.includes,
        configuration.excludes,
        use_default_excludes=configuration.use_default_excludes,
    )

    if cancel_event is not None and cancel_event.is_set():
        raise RunCancelledError("Run cancelled before reporting.")

    return count_html_files(matched_files, run_log)


def count_html_files(matched_files: Iterable[str], log: RunLog) -> RunResult:
    """Log and count every path ending with the literal ``html`` suffix."""
    count = 0
    for matched_file in matched_files:
        # Literal suffix: "somehtml" counts, "INDEX.HTML" does not.
        if matched_file.endswith(HTML_SUFFIX):
            log.info(f"Found file {matched_file}")
            count += 1

    log.info(f"Processed {count} files")
    return RunResult(processed_count=count)


def log_configuration(configuration: RunConfiguration, log: RunLog) -> None:
    """Log the resolved run configuration, one value per line."""
    log.info(CONFIGURATION_BANNER)
    log.info(f"sourceDirectory = {configuration.source_directory}")
    log.info(f"outputDirectory = {configuration.output_directory}")
    log.info("includes:")
    for include in configuration.includes:
        log.info(f"   {include}")
    log.info("excludes:")
    for exclude in configuration.excludes:
        log.info(f"   {exclude}")
    log.info(f"skip = {str(configuration.skip).lower()}")
