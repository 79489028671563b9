"""Data models describing one generation run."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Sequence

from tensorbind.core import FunctionDecl


@dataclass(frozen=True)
class GenerationOptions:
    check: bool = False
    list_only: bool = False


@dataclass(frozen=True)
class GenerationResult:
    schema: Path
    records: int
    functions: Mapping[str, FunctionDecl]
    rejected: Mapping[str, int]
    artifacts: Sequence[Path] = field(default_factory=tuple)
    stale: Sequence[Path] = field(default_factory=tuple)
    diffs: Mapping[Path, str] = field(default_factory=dict)

    @property
    def accepted(self) -> int:
        return len(self.functions)

    @property
    def up_to_date(self) -> bool:
        return not self.stale
