"""Hand-authored method records merged ahead of the schema records."""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping


def _method(name: str, *arguments: tuple[str, str]) -> Mapping[str, Any]:
    return {
        "name": name,
        "deprecated": False,
        "method_of": ["Tensor"],
        "arguments": [{"name": arg_name, "dynamic_type": arg_type} for arg_name, arg_type in arguments],
        "returns": [{"dynamic_type": "Tensor"}],
    }


SEED_RECORDS: tuple[Mapping[str, Any], ...] = (
    _method("grad", ("self", "Tensor")),
    _method("set_requires_grad", ("self", "Tensor"), ("r", "bool")),
    _method("toType", ("self", "Tensor"), ("scalar_type", "ScalarType")),
    _method("to", ("self", "Tensor"), ("device", "Device")),
)


def with_seeds(records: Iterable[Any]) -> List[Any]:
    """Return the seed records followed by ``records``."""

    return [*SEED_RECORDS, *records]
