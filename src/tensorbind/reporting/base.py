"""Reporter interface definitions."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence

if TYPE_CHECKING:
    from tensorbind.pipeline.models import GenerationResult


class Reporter:
    """Interface for output renderers."""

    def on_records(self, schema: Path, count: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_accepted(self, count: int) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def on_complete(self, result: "GenerationResult") -> None:  # pragma: no cover - interface
        raise NotImplementedError


class ReportManager:
    """Dispatches lifecycle callbacks to multiple reporters."""

    def __init__(self, reporters: Sequence[Reporter]) -> None:
        self._reporters = list(reporters)

    def records_read(self, schema: Path, count: int) -> None:
        for reporter in self._reporters:
            reporter.on_records(schema, count)

    def functions_accepted(self, count: int) -> None:
        for reporter in self._reporters:
            reporter.on_accepted(count)

    def complete(self, result: "GenerationResult") -> None:
        for reporter in self._reporters:
            reporter.on_complete(result)

    def reporters(self) -> List[Reporter]:
        return list(self._reporters)
