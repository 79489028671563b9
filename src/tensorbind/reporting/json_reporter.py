"""JSON reporter emitting a structured generation summary."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import TYPE_CHECKING, Any, Dict, Optional

import click
from jsonschema import validate

from tensorbind.core import FunctionDecl

from .base import Reporter
from .schema import REPORT_SCHEMA, SCHEMA_VERSION

if TYPE_CHECKING:
    from tensorbind.pipeline.models import GenerationResult


class JsonReporter(Reporter):
    """Writes the run summary as JSON validated against the schema.

    Without a path the document is echoed to stdout.
    """

    def __init__(self, path: Optional[str] = None) -> None:
        self._path = pathlib.Path(path) if path else None

    def on_records(self, schema: pathlib.Path, count: int) -> None:
        pass

    def on_accepted(self, count: int) -> None:
        pass

    def on_complete(self, result: "GenerationResult") -> None:
        payload = build_payload(result)
        validate(instance=payload, schema=REPORT_SCHEMA)
        text = json.dumps(payload, indent=2)
        if self._path is None:
            click.echo(text)
            return
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(text, encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")


def build_payload(result: "GenerationResult") -> Dict[str, Any]:
    stale = set(result.stale)
    generated_at = dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at": generated_at.isoformat(timespec="seconds") + "Z",
        "schema": str(result.schema),
        "summary": {
            "records": result.records,
            "accepted": result.accepted,
            "rejected": dict(result.rejected),
            "up_to_date": result.up_to_date,
        },
        "artifacts": [{"path": str(path), "stale": path in stale} for path in result.artifacts],
        "functions": [_function_to_dict(name, decl) for name, decl in result.functions.items()],
    }


def _function_to_dict(exported_name: str, decl: FunctionDecl) -> Dict[str, Any]:
    return {
        "exported_name": exported_name,
        "name": decl.name,
        "kind": decl.kind.value,
        "arguments": [
            {"name": arg.name, "kind": arg.kind.value, "default": arg.default}
            for arg in decl.arguments
        ],
    }
