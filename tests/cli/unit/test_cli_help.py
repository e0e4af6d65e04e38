"""CLI smoke tests."""

from click.testing import CliRunner
from html_fileset_counter.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "run" in result.output


def test_run_command_lists_fileset_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--help"])

    assert result.exit_code == 0
    for option in ("--source", "--output", "--include", "--exclude", "--skip", "--verbose"):
        assert option in result.output
