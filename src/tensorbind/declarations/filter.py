"""Acceptance predicate turning raw records into :class:`FunctionDecl` values."""
from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Tuple, Union

from tensorbind.core import FunctionDecl, FunctionKind, UnsupportedArgument, resolve_arguments
from tensorbind.schema import expect_bool, expect_list, expect_map, expect_string, require, validate_record

# Operations whose signatures are too irregular to bind automatically.
EXCLUDED_FUNCTIONS = frozenset({"bincount", "stft", "group_norm", "layer_norm", "rot90", "t"})

TENSOR_RETURN_TYPES = frozenset({"Tensor", "BoolTensor"})


class Rejection(enum.Enum):
    """Why a record was silently left out of the bindings."""

    RETURN_TYPE = "return-type"
    DEPRECATED = "deprecated"
    PRIVATE = "private"
    EXCLUDED = "excluded"
    NO_CONTEXT = "no-context"
    UNSUPPORTED_ARGUMENT = "unsupported-argument"


@dataclass(frozen=True)
class FilterResult:
    accepted: Tuple[FunctionDecl, ...]
    rejected: Counter = field(default_factory=Counter)

    @property
    def total(self) -> int:
        return len(self.accepted) + sum(self.rejected.values())


def filter_records(records: Iterable[Any]) -> FilterResult:
    """Normalize every record, keeping accepted declarations in input order."""

    accepted: list[FunctionDecl] = []
    rejected: Counter = Counter()
    for raw in records:
        outcome = normalize_record(raw)
        if isinstance(outcome, Rejection):
            rejected[outcome.value] += 1
        else:
            accepted.append(outcome)
    return FilterResult(accepted=tuple(accepted), rejected=rejected)


def normalize_record(raw: Any) -> Union[FunctionDecl, Rejection]:
    """Apply the acceptance predicate to one raw record.

    Structural problems raise :class:`~tensorbind.errors.SchemaError` and a
    method without a receiver raises :class:`~tensorbind.errors.DeclarationError`;
    records that are well formed but not bindable return a :class:`Rejection`.
    """

    record = validate_record(raw)
    name = expect_string(require(record, "name"))
    if not _returns_tensor(require(record, "returns")):
        return Rejection.RETURN_TYPE
    if expect_bool(require(record, "deprecated")):
        return Rejection.DEPRECATED
    if name.startswith("_"):
        return Rejection.PRIVATE
    if name in EXCLUDED_FUNCTIONS:
        return Rejection.EXCLUDED
    method_of = [expect_string(tag) for tag in expect_list(require(record, "method_of"))]
    kind = _classify(method_of)
    if kind is None:
        return Rejection.NO_CONTEXT
    raw_args = expect_list(require(record, "arguments"))
    try:
        arguments = resolve_arguments(raw_args, kind)
    except UnsupportedArgument:
        return Rejection.UNSUPPORTED_ARGUMENT
    return FunctionDecl(name=name, arguments=arguments, kind=kind)


def _returns_tensor(raw: Any) -> bool:
    returns = expect_list(raw)
    if len(returns) != 1:
        return False
    entry = expect_map(returns[0])
    return expect_string(require(entry, "dynamic_type")) in TENSOR_RETURN_TYPES


def _classify(method_of: list[str]) -> Optional[FunctionKind]:
    if "namespace" in method_of:
        return FunctionKind.FUNCTION
    if "Tensor" in method_of:
        return FunctionKind.METHOD
    return None
