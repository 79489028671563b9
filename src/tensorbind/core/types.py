"""Resolution of declared argument types onto :class:`ArgKind`."""
from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

from tensorbind.schema.loader import expect_bool, expect_map, expect_string, require, scalar_text

from .models import ArgKind, Argument, FunctionKind

_SIMPLE_KINDS: Mapping[str, ArgKind] = {
    "bool": ArgKind.BOOL,
    "int64_t": ArgKind.INT64,
    "double": ArgKind.DOUBLE,
    "tensoroptions": ArgKind.TENSOR_OPTIONS,
    "intlist": ArgKind.INT_LIST,
    "tensorlist": ArgKind.TENSOR_LIST,
    "device": ArgKind.DEVICE,
    "scalartype": ArgKind.SCALAR_TYPE,
}


class UnsupportedArgument(Exception):
    """Raised when a required argument has no bindable kind."""

    def __init__(self, name: str, dynamic_type: str) -> None:
        super().__init__(f"argument '{name}' has unsupported type '{dynamic_type}'")
        self.name = name
        self.dynamic_type = dynamic_type


def arg_kind_of_string(dynamic_type: str, *, is_nullable: bool = False) -> Optional[ArgKind]:
    """Map a declared type onto an :class:`ArgKind` (case-insensitive)."""

    key = dynamic_type.lower()
    if key == "tensor":
        return ArgKind.TENSOR_OPTION if is_nullable else ArgKind.TENSOR
    return _SIMPLE_KINDS.get(key)


def resolve_arguments(raw_args: Sequence[Any], kind: FunctionKind) -> tuple[Argument, ...]:
    """Turn raw argument records into typed arguments.

    Unresolvable arguments with a default are dropped from the signature.
    Unresolvable arguments without one raise :class:`UnsupportedArgument`,
    as does an unresolvable method receiver whether or not it has a default.
    """

    arguments: List[Argument] = []
    for index, raw in enumerate(raw_args):
        entry = expect_map(raw)
        name = expect_string(require(entry, "name"))
        dynamic_type = expect_string(require(entry, "dynamic_type"))
        is_nullable = expect_bool(entry["is_nullable"]) if "is_nullable" in entry else False
        default = scalar_text(entry["default"]) if "default" in entry else None
        arg_kind = arg_kind_of_string(dynamic_type, is_nullable=is_nullable)
        if arg_kind is not None:
            arguments.append(Argument(name=name, kind=arg_kind, default=default))
            continue
        if index == 0 and kind is FunctionKind.METHOD:
            raise UnsupportedArgument(name, dynamic_type)
        if default is None:
            raise UnsupportedArgument(name, dynamic_type)
    return tuple(arguments)
