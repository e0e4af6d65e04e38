"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .run_settings import CATCH_ALL_PATTERN, RunConfiguration

RECOGNIZED_OPTIONS = (
    "source",
    "output",
    "includes",
    "excludes",
    "skip",
    "verbose",
    "use_default_excludes",
)

_TRUE_STRINGS = frozenset({"true", "yes", "on", "1"})
_FALSE_STRINGS = frozenset({"false", "no", "off", "0"})


class ConfigurationError(Exception):
    """Raised when run settings are missing or invalid."""


def build_run_configuration(
    source: Path | str | None,
    output: Path | str | None = None,
    includes: Any = None,
    excludes: Any = None,
    skip: Any = False,
    verbose: Any = False,
    use_default_excludes: Any = True,
) -> RunConfiguration:
    """Coerce raw option values into a run configuration and fill defaults."""
    source_directory = _require_path(source, "source")
    output_directory = _optional_path(output, "output") or source_directory.absolute()
    include_patterns = _normalize_patterns(includes, "includes") or (CATCH_ALL_PATTERN,)
    exclude_patterns = _normalize_patterns(excludes, "excludes")
    return RunConfiguration(
        source_directory=source_directory,
        output_directory=output_directory,
        includes=include_patterns,
        excludes=exclude_patterns,
        skip=_require_bool(skip, "skip"),
        verbose=_require_bool(verbose, "verbose"),
        use_default_excludes=_require_bool(use_default_excludes, "use_default_excludes"),
    )


def load_configuration(
    config_path: Path | str, overrides: Mapping[str, Any] | None = None
) -> RunConfiguration:
    """Load a YAML/JSON configuration file and apply non-null overrides on top."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
        parsed = yaml.safe_load(text)
    except OSError as exc:
        raise ConfigurationError(f"Failed to read configuration file: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in RECOGNIZED_OPTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration option(s): {', '.join(unknown)}")

    options: dict[str, Any] = dict(parsed)
    for key in ("source", "output"):
        value = options.get(key)
        if isinstance(value, str) and value.strip():
            options[key] = _resolve_path(path.parent, value.strip())
    options.update(merge_overrides(overrides))

    return build_run_configuration(
        source=options.get("source"),
        output=options.get("output"),
        includes=options.get("includes"),
        excludes=options.get("excludes"),
        skip=options.get("skip", False),
        verbose=options.get("verbose", False),
        use_default_excludes=options.get("use_default_excludes", True),
    )


def merge_overrides(overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Drop unset override values so they do not mask configured ones."""
    if not overrides:
        return {}
    merged: dict[str, Any] = {}
    for key, value in overrides.items():
        if key not in RECOGNIZED_OPTIONS:
            raise ConfigurationError(f"Unknown configuration option: {key}")
        if value is None:
            continue
        if isinstance(value, Sequence) and not isinstance(value, str) and not value:
            continue
        merged[key] = value
    return merged


def _normalize_patterns(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(item.strip() for item in value.split(",") if item.strip())
    if isinstance(value, Sequence):
        patterns: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                patterns.append(stripped)
        return tuple(patterns)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _require_path(value: Any, field_name: str) -> Path:
    path = _optional_path(value, field_name)
    if path is None:
        raise ConfigurationError(f"{field_name} is required.")
    return path


def _optional_path(value: Any, field_name: str) -> Path | None:
    if value is None:
        return None
    if isinstance(value, Path):
        return value
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a path string.")
    stripped = value.strip()
    return Path(stripped) if stripped else None


def _require_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ConfigurationError(f"{field_name} must be a boolean.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate
