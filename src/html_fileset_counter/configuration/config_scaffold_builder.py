"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "html-fileset-counter.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Run configuration template for html-fileset-counter.
# Replace the <REQUIRED> placeholder before running `run --config`.
# Remove or fill the optional settings; the values shown are the defaults.

# Directory to scan. Relative paths are resolved against this file.
source: "<REQUIRED>"

# Recorded for reference only. Defaults to the source directory.
# output: "<OPTIONAL>"

# Fileset patterns relative to the source directory.
# `*` matches within a path segment, `**` matches any number of segments.
includes:
  - "**/*"
excludes: []

# Apply the standard SCM and editor excludes (.git, .svn, *~, ...).
use_default_excludes: true

# Skip all processing and only log a notice.
skip: false

# Log the resolved configuration before scanning.
verbose: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML run configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder run configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Run configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
