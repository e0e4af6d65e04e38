"""Tests for run execution domain entities."""

from __future__ import annotations

import dataclasses
import logging

import pytest
from html_fileset_counter.run_execution.run_contracts import RunLog, RunResult


def test_run_result_defaults_to_not_skipped() -> None:
    result = RunResult(processed_count=3)

    assert result.processed_count == 3
    assert result.skipped is False


def test_run_result_is_immutable() -> None:
    result = RunResult(processed_count=0, skipped=True)

    with pytest.raises(dataclasses.FrozenInstanceError):
        result.processed_count = 1  # type: ignore[misc]


def test_standard_logger_is_a_run_log() -> None:
    log: RunLog = logging.getLogger("html_fileset_counter.tests.contracts")

    assert callable(log.info)
    assert log.isEnabledFor(logging.CRITICAL)
