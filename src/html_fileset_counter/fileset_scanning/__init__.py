"""Fileset scanning domain exports."""

from .directory_scanner import InvalidDirectoryError, enumerate_included_files
from .glob_patterns import (
    CATCH_ALL_INCLUDE,
    DEFAULT_EXCLUDES,
    FilesetMatcher,
    compile_pattern,
    normalize_pattern,
)

__all__ = [
    "CATCH_ALL_INCLUDE",
    "DEFAULT_EXCLUDES",
    "FilesetMatcher",
    "InvalidDirectoryError",
    "compile_pattern",
    "enumerate_included_files",
    "normalize_pattern",
]
