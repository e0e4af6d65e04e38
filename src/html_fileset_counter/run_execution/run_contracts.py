"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


class RunLog(Protocol):
    """Logging capability injected into a run. ``logging.Logger`` satisfies it."""

    def info(self, msg: str) -> None: ...

    def isEnabledFor(self, level: int) -> bool: ...  # noqa: N802


@dataclass(frozen=True)
class RunResult:
    """Output contract for one completed run."""

    processed_count: int
    skipped: bool = False
