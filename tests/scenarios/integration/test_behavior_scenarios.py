"""Scenario-style integration tests for core run behaviors."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from html_fileset_counter.configuration import build_run_configuration
from html_fileset_counter.fileset_scanning import InvalidDirectoryError, enumerate_included_files
from html_fileset_counter.run_execution import execute_html_count_run

LOGGER_NAME = "html_fileset_counter.tests.scenarios"


@pytest.fixture
def scenario_directory(tmp_path: Path) -> Path:
    for name in ("index.html", "notes.txt", "readme.htm"):
        (tmp_path / name).write_text("", encoding="utf-8")
    return tmp_path


def _run(configuration, caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        return execute_html_count_run(configuration, log=logging.getLogger(LOGGER_NAME))


def _found_lines(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [
        record.getMessage()
        for record in caplog.records
        if record.getMessage().startswith("Found file")
    ]


def test_scenario_a_counts_only_html_suffix(
    scenario_directory: Path, caplog: pytest.LogCaptureFixture
) -> None:
    result = _run(build_run_configuration(source=scenario_directory), caplog)

    assert result.processed_count == 1
    assert _found_lines(caplog) == ["Found file index.html"]


def test_scenario_b_exclude_shrinks_enumeration_but_not_count(
    scenario_directory: Path, caplog: pytest.LogCaptureFixture
) -> None:
    configuration = build_run_configuration(source=scenario_directory, excludes=["**/*.txt"])

    result = _run(configuration, caplog)

    assert result.processed_count == 1
    all_files = enumerate_included_files(scenario_directory, ["**/*"], [])
    narrowed = enumerate_included_files(scenario_directory, ["**/*"], ["**/*.txt"])
    assert len(narrowed) == len(all_files) - 1


def test_scenario_c_skip_logs_single_notice(
    scenario_directory: Path, caplog: pytest.LogCaptureFixture
) -> None:
    result = _run(build_run_configuration(source=scenario_directory, skip=True), caplog)

    assert result.processed_count == 0
    assert _found_lines(caplog) == []
    assert [record.getMessage() for record in caplog.records] == ["Skipping file formatting"]


def test_scenario_d_missing_source_fails_without_count(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    configuration = build_run_configuration(source=tmp_path / "does-not-exist")

    with pytest.raises(InvalidDirectoryError):
        _run(configuration, caplog)

    assert not any("Processed" in record.getMessage() for record in caplog.records)


@pytest.mark.parametrize(("html_count", "other_count"), [(0, 0), (0, 3), (4, 0), (3, 5)])
def test_count_equals_number_of_html_suffixed_files(
    tmp_path: Path, caplog: pytest.LogCaptureFixture, html_count: int, other_count: int
) -> None:
    for index in range(html_count):
        (tmp_path / f"page{index}.html").write_text("", encoding="utf-8")
    for index in range(other_count):
        (tmp_path / f"asset{index}.css").write_text("", encoding="utf-8")

    result = _run(build_run_configuration(source=tmp_path), caplog)

    assert result.processed_count == html_count
