"""Fileset directory scanning service."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence
from pathlib import Path

from .glob_patterns import FilesetMatcher

_LOGGER = logging.getLogger(__name__)


class InvalidDirectoryError(Exception):
    """Raised when the fileset directory is missing, not a directory or unreadable."""


def enumerate_included_files(
    base_dir: Path | str,
    includes: Sequence[str],
    excludes: Sequence[str] = (),
    *,
    use_default_excludes: bool = True,
) -> list[str]:
    """Return the relative paths of files under ``base_dir`` selected by the patterns.

    Includes are applied first and excludes remove from that result. Paths use
    ``/`` separators and follow filesystem traversal order, which is not sorted
    and may differ between platforms. Symlinked files are skipped and an empty
    include list selects every file.

    Raises:
      InvalidDirectoryError: If ``base_dir`` cannot be scanned.
    """
    root = _require_scannable_directory(Path(base_dir))
    matcher = FilesetMatcher(
        includes=tuple(includes),
        excludes=tuple(excludes),
        use_default_excludes=use_default_excludes,
    )
    included = [relative for relative in _walk_relative_files(root) if matcher.matches(relative)]
    _LOGGER.debug("Fileset %s matched %d file(s)", root, len(included))
    return included


def _require_scannable_directory(base_dir: Path) -> Path:
    if not base_dir.exists():
        raise InvalidDirectoryError(f"Source directory does not exist: {base_dir}")
    if not base_dir.is_dir():
        raise InvalidDirectoryError(f"Source path is not a directory: {base_dir}")
    try:
        with os.scandir(base_dir):
            pass
    except OSError as exc:
        raise InvalidDirectoryError(f"Source directory is not readable: {base_dir}: {exc}") from exc
    return base_dir.absolute()


def _walk_relative_files(root: Path) -> Iterator[str]:
    for current_dir, _dir_names, file_names in os.walk(root, onerror=_log_walk_error):
        relative_dir = Path(current_dir).relative_to(root)
        for file_name in file_names:
            # Symlinked files are never reported.
            if os.path.islink(os.path.join(current_dir, file_name)):
                continue
            yield (relative_dir / file_name).as_posix()


def _log_walk_error(error: OSError) -> None:
    _LOGGER.warning("Skipping unreadable directory %s: %s", error.filename, error.strerror)
