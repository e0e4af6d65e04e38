"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from html_fileset_counter.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    build_run_configuration,
    load_configuration,
    write_placeholder_configuration,
)
from html_fileset_counter.fileset_scanning import InvalidDirectoryError
from html_fileset_counter.run_execution import RunExecutionError, execute_html_count_run
from html_fileset_counter.run_logging import configure_logging, get_run_logger

DEFAULT_SOURCE_DIRECTORY = "target"


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="html-fileset-counter")
def cli() -> None:
    """Count HTML files selected by include/exclude fileset patterns."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML run configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML run configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="run")
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON run configuration file",
)
@click.option(
    "--source",
    "source",
    required=False,
    type=click.Path(path_type=str),
    help=f"Directory to scan [default: ./{DEFAULT_SOURCE_DIRECTORY}]",
)
@click.option(
    "--output",
    "output",
    required=False,
    type=click.Path(path_type=str),
    help="Output directory, recorded only [default: source directory]",
)
@click.option(
    "--include",
    "includes",
    multiple=True,
    help="Fileset include pattern, repeatable [default: **/*]",
)
@click.option(
    "--exclude",
    "excludes",
    multiple=True,
    help="Fileset exclude pattern, repeatable",
)
@click.option("--skip/--no-skip", default=None, help="Skip all processing and log a notice.")
@click.option(
    "--verbose/--no-verbose", default=None, help="Log the configuration before scanning."
)
@click.option(
    "--default-excludes/--no-default-excludes",
    "use_default_excludes",
    default=None,
    help="Apply the standard SCM and editor excludes [default: on].",
)
@click.option("--debug", is_flag=True, default=False, help="Enable debug logging.")
def run_count(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    config_path: str | None,
    source: str | None,
    output: str | None,
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    skip: bool | None,
    verbose: bool | None,
    use_default_excludes: bool | None,
    debug: bool,
) -> None:
    """Scan the source directory and count files whose path ends with html."""
    configure_logging(logging.DEBUG if debug else logging.INFO)
    overrides = {
        "source": source,
        "output": output,
        "includes": includes,
        "excludes": excludes,
        "skip": skip,
        "verbose": verbose,
        "use_default_excludes": use_default_excludes,
    }
    try:
        if config_path:
            configuration = load_configuration(config_path, overrides)
        else:
            configuration = build_run_configuration(
                source=source or str(Path.cwd() / DEFAULT_SOURCE_DIRECTORY),
                output=output,
                includes=includes,
                excludes=excludes,
                skip=bool(skip),
                verbose=bool(verbose),
                use_default_excludes=use_default_excludes is not False,
            )
        execute_html_count_run(configuration, log=get_run_logger())
    except (ConfigurationError, InvalidDirectoryError, RunExecutionError) as exc:
        raise CliError(str(exc)) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
