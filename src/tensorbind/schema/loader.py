"""YAML loader and typed extraction helpers for declaration files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, List, Mapping, NoReturn

import yaml
from jsonschema import Draft7Validator

from tensorbind.errors import SchemaError

from .records import RECORD_SCHEMA


def load_records(path: str | Path) -> List[Any]:
    """Read every raw declaration record from ``path``.

    The text is split into per-item chunks and each chunk is parsed on its own;
    a single ``yaml.safe_load`` over a full declarations file is slow and has
    proven unreliable for very large inputs.
    """

    schema_path = Path(path)
    text = schema_path.read_text(encoding="utf-8")
    records: List[Any] = []
    for chunk in split_records(text):
        try:
            parsed = yaml.safe_load(chunk)
        except yaml.YAMLError as exc:
            first_line = chunk.split("\n", 1)[0]
            raise SchemaError(f"Invalid YAML in {schema_path} near '{first_line}': {exc}") from exc
        if parsed is None:
            continue
        records.extend(expect_list(parsed))
    return records


def split_records(text: str) -> List[str]:
    """Split raw text at every line starting with ``-``."""

    chunks: List[List[str]] = []
    current: List[str] = []
    for line in text.splitlines():
        if line.startswith("-") and current:
            chunks.append(current)
            current = []
        current.append(line)
    if current:
        chunks.append(current)
    return ["\n".join(lines) for lines in chunks if any(line.strip() for line in lines)]


def validate_record(raw: Any) -> Mapping[str, Any]:
    """Check the structural shape of one record and return it as a mapping."""

    record = expect_map(raw)
    errors = sorted(_validator.iter_errors(record), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        _fail(record, f"Declaration schema validation failed: {messages}")
    return record


def require(mapping: Mapping[str, Any], key: str) -> Any:
    if key not in mapping:
        _fail(mapping, f"missing required key '{key}'")
    return mapping[key]


def expect_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value == "true":
        return True
    if value == "false":
        return False
    _fail(value, "expected bool")


def expect_list(value: Any) -> list:
    if isinstance(value, list):
        return value
    _fail(value, "expected list")


def expect_map(value: Any) -> Mapping[str, Any]:
    if isinstance(value, Mapping):
        return value
    _fail(value, "expected map")


def expect_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    _fail(value, "expected string")


def scalar_text(value: Any) -> str:
    """Render a scalar default value as text."""

    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (int, float)):
        return str(value)
    _fail(value, "expected scalar")


def _fail(value: Any, msg: str) -> NoReturn:
    raise SchemaError(f"{msg}, {_render(value)}")


def _render(value: Any) -> str:
    if not isinstance(value, (Mapping, list)):
        return repr(value)
    try:
        return yaml.safe_dump(value, default_flow_style=True, sort_keys=False).strip()
    except yaml.YAMLError:
        return repr(value)


_validator = Draft7Validator(RECORD_SCHEMA)
