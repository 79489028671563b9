"""Core dataclasses describing bindable declarations."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple

from tensorbind.errors import DeclarationError


class ArgKind(enum.Enum):
    """Closed set of argument shapes that can cross the language boundary."""

    BOOL = "bool"
    INT64 = "int64"
    DOUBLE = "double"
    TENSOR = "tensor"
    TENSOR_OPTION = "tensor_option"
    INT_LIST = "int_list"
    TENSOR_LIST = "tensor_list"
    TENSOR_OPTIONS = "tensor_options"
    SCALAR_TYPE = "scalar_type"
    DEVICE = "device"

    @property
    def is_list(self) -> bool:
        return self in (ArgKind.INT_LIST, ArgKind.TENSOR_LIST)


class FunctionKind(enum.Enum):
    FUNCTION = "function"
    METHOD = "method"


@dataclass(frozen=True)
class Argument:
    """Typed argument; ``default`` is advisory and never reaches generated calls."""

    name: str
    kind: ArgKind
    default: Optional[str] = None


@dataclass(frozen=True)
class FunctionDecl:
    """A declaration accepted for binding.

    Methods carry their receiver as argument 0.
    """

    name: str
    arguments: Tuple[Argument, ...]
    kind: FunctionKind

    def __post_init__(self) -> None:
        if not isinstance(self.arguments, tuple):
            object.__setattr__(self, "arguments", tuple(self.arguments))
        if self.kind is FunctionKind.METHOD and not self.arguments:
            raise DeclarationError(f"Method calls should have at least one argument: {self.name}")

    @property
    def is_method(self) -> bool:
        return self.kind is FunctionKind.METHOD

    @property
    def receiver(self) -> Optional[Argument]:
        if not self.is_method:
            return None
        return self.arguments[0]

    @property
    def forwarded_arguments(self) -> Tuple[Argument, ...]:
        """Arguments passed inside the call parentheses."""

        if self.is_method:
            return self.arguments[1:]
        return self.arguments
