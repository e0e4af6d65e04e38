"""Fileset glob pattern compilation and matching.

Patterns use the Ant/Maven fileset dialect:

* ``*`` matches zero or more characters inside one path segment.
* ``?`` matches exactly one character inside one path segment.
* ``**`` matches zero or more whole path segments.
* A trailing ``/`` is shorthand for ``/**``.

Matching is case-sensitive and always runs against ``/`` separated paths
relative to the fileset directory.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field

DEFAULT_EXCLUDES: tuple[str, ...] = (
    # Miscellaneous editor and OS artifacts
    "**/*~",
    "**/#*#",
    "**/.#*",
    "**/%*%",
    "**/._*",
    "**/.DS_Store",
    # CVS
    "**/CVS",
    "**/CVS/**",
    "**/.cvsignore",
    # RCS and SCCS
    "**/RCS",
    "**/RCS/**",
    "**/SCCS",
    "**/SCCS/**",
    # Visual SourceSafe
    "**/vssver.scc",
    # MKS
    "**/project.pj",
    # Subversion
    "**/.svn",
    "**/.svn/**",
    # Arch
    "**/.arch-ids",
    "**/.arch-ids/**",
    # Bazaar
    "**/.bzr",
    "**/.bzr/**",
    # SurroundSCM
    "**/.MySCMServerInfo",
    # Eclipse workspace
    "**/.metadata",
    "**/.metadata/**",
    # Mercurial
    "**/.hg",
    "**/.hg/**",
    # git
    "**/.git",
    "**/.git/**",
    "**/.gitignore",
    "**/.gitattributes",
    # BitKeeper
    "**/BitKeeper",
    "**/BitKeeper/**",
    "**/ChangeSet",
    "**/ChangeSet/**",
    # darcs
    "**/_darcs",
    "**/_darcs/**",
    "**/.darcsrepo",
    "**/.darcsrepo/**",
    "**/-darcs-backup*",
    "**/.darcs-temp-mail",
)

# Applied when a fileset names no includes.
CATCH_ALL_INCLUDE = "**/*"

_SEGMENT_WILDCARDS = {"*": "[^/]*", "?": "[^/]"}


def normalize_pattern(pattern: str) -> str:
    """Return the canonical ``/`` separated form of one fileset pattern."""
    normalized = pattern.strip().replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    normalized = normalized.lstrip("/")
    if normalized.endswith("/"):
        normalized += "**"
    return normalized


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate one fileset pattern into an anchored regular expression."""
    segments = normalize_pattern(pattern).split("/")
    parts: list[str] = []
    for index, segment in enumerate(segments):
        is_last = index == len(segments) - 1
        if segment == "**":
            parts.append(".*" if is_last else "(?:[^/]*/)*")
            continue
        translated = "".join(_SEGMENT_WILDCARDS.get(char, re.escape(char)) for char in segment)
        parts.append(translated if is_last else translated + "/")
    return re.compile("".join(parts))


@dataclass(frozen=True)
class FilesetMatcher:
    """Compiled include/exclude pattern set for one fileset."""

    includes: tuple[str, ...]
    excludes: tuple[str, ...] = ()
    use_default_excludes: bool = True
    _include_regexes: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)
    _exclude_regexes: tuple[re.Pattern[str], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        excludes = self.excludes + (DEFAULT_EXCLUDES if self.use_default_excludes else ())
        include_regexes = _compile_all(self.includes) or _compile_all((CATCH_ALL_INCLUDE,))
        object.__setattr__(self, "_include_regexes", include_regexes)
        object.__setattr__(self, "_exclude_regexes", _compile_all(excludes))

    def is_included(self, relative_path: str) -> bool:
        return _matches_any(self._include_regexes, relative_path)

    def is_excluded(self, relative_path: str) -> bool:
        return _matches_any(self._exclude_regexes, relative_path)

    def matches(self, relative_path: str) -> bool:
        """Return True when the path is included and not excluded."""
        return self.is_included(relative_path) and not self.is_excluded(relative_path)


def _compile_all(patterns: Iterable[str]) -> tuple[re.Pattern[str], ...]:
    return tuple(compile_pattern(pattern) for pattern in patterns if pattern.strip())


def _matches_any(regexes: Iterable[re.Pattern[str]], relative_path: str) -> bool:
    return any(regex.fullmatch(relative_path) for regex in regexes)
