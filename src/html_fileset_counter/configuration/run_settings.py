"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

CATCH_ALL_PATTERN = "**/*"


@dataclass(frozen=True)
class RunConfiguration:
    """Normalized settings for one scan-and-count run."""

    source_directory: Path
    output_directory: Path
    includes: tuple[str, ...] = (CATCH_ALL_PATTERN,)
    excludes: tuple[str, ...] = ()
    skip: bool = False
    verbose: bool = False
    use_default_excludes: bool = True
