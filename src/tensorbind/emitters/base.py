"""Emitter interface shared by the three artifact backends."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Mapping

from tensorbind.core import FunctionDecl

C_BANNER = "// THIS FILE IS AUTOMATICALLY GENERATED, DO NOT EDIT BY HAND!"
PY_BANNER = "# THIS FILE IS AUTOMATICALLY GENERATED, DO NOT EDIT BY HAND!"

DEFAULT_SYMBOL_PREFIX = "atg_"

Functions = Mapping[str, FunctionDecl]


class Emitter:
    """Renders the accepted-function map into one or more source files."""

    name: str = ""

    def __init__(self, destination: Path, *, symbol_prefix: str = DEFAULT_SYMBOL_PREFIX) -> None:
        self.destination = Path(destination)
        self.symbol_prefix = symbol_prefix

    def symbol(self, exported_name: str) -> str:
        return f"{self.symbol_prefix}{exported_name}"

    def render(self, funcs: Functions) -> Dict[Path, str]:  # pragma: no cover - interface
        """Return generated text keyed by destination path."""

        raise NotImplementedError


def write_artifact(path: Path, content: str) -> None:
    """Write one artifact; the handle is closed on every exit path."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as handle:
        handle.write(content)
