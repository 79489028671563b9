"""Terminal reporter printing progress and summaries."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from colorama import Fore, Style, init as colorama_init

from .base import Reporter

if TYPE_CHECKING:
    from tensorbind.pipeline.models import GenerationResult


class TerminalReporter(Reporter):
    """Human-readable reporter that streams to stdout."""

    def __init__(self, *, use_color: bool = True, verbose: bool = False, list_names: bool = False) -> None:
        self._use_color = use_color
        self._verbose = verbose
        self._list_names = list_names
        if use_color:
            colorama_init()

    def on_records(self, schema: Path, count: int) -> None:
        print(f"Read {schema}, got {count} functions.")

    def on_accepted(self, count: int) -> None:
        print(f"Generating code for {count} functions.")

    def on_complete(self, result: "GenerationResult") -> None:
        if self._list_names:
            for name in result.functions:
                print(name)
        if self._verbose:
            for reason, count in result.rejected.items():
                print(f"    rejected {reason}: {count}")
            for path in result.artifacts:
                print(f"    artifact: {path}")
        for path in result.stale:
            print(f"{self._color(Fore.RED)}STALE{self._reset()} {path}")
            diff = result.diffs.get(path)
            if diff:
                print(diff)
        rejected = sum(result.rejected.values())
        summary_color = self._color(Fore.GREEN if result.up_to_date else Fore.RED)
        print(
            f"{summary_color}Summary{self._reset()}: records={result.records} "
            f"accepted={result.accepted} rejected={rejected} artifacts={len(result.artifacts)}"
        )

    def _color(self, color: str) -> str:
        return color if self._use_color else ""

    def _reset(self) -> str:
        return Style.RESET_ALL if self._use_color else ""
