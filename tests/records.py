"""Builders for raw declaration records used across the tests."""
from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence


def make_record(
    name: str,
    *,
    args: Sequence[Dict[str, Any]] = (),
    method_of: Iterable[str] = ("namespace",),
    returns: Sequence[str] = ("Tensor",),
    deprecated: Any = False,
) -> Dict[str, Any]:
    return {
        "name": name,
        "deprecated": deprecated,
        "method_of": list(method_of),
        "arguments": [dict(item) for item in args],
        "returns": [{"dynamic_type": value} for value in returns],
    }


def arg(name: str, dynamic_type: str, **extra: Any) -> Dict[str, Any]:
    return {"name": name, "dynamic_type": dynamic_type, **extra}
