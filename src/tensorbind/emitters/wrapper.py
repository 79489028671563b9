"""High-level Python wrapper marshalling idiomatic arguments into the FFI."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from tensorbind.core import ArgKind, Argument, FunctionDecl
from tensorbind.declarations.naming import escape_name

from .base import PY_BANNER, Emitter, Functions
from .codegen import CodeGen

DEFAULT_RUNTIME_MODULE = ".runtime"

# Generated functions may shadow builtins such as ``abs`` or ``max``, so the
# helpers bind the builtins they need under private names.
_PREAMBLE = (
    "from builtins import len as _len, list as _list",
    "",
    "",
    "def _long_array(values):",
    "    values = _list(values)",
    "    return (ctypes.c_long * _len(values))(*values), _len(values)",
    "",
    "",
    "def _tensor_array(tensors):",
    "    handles = [tensor.ptr for tensor in tensors]",
    "    return (ctypes.c_void_p * _len(handles))(*handles), _len(handles)",
    "",
    "",
    "def _wrap(handle):",
    "    if handle is None:",
    "        raise RuntimeError(last_error() or \"native call returned a null tensor\")",
    "    tensor = Tensor(handle)",
    "    weakref.finalize(tensor, free, tensor.ptr)",
    "    return tensor",
)


def python_parameters(decl: FunctionDecl) -> str:
    return ", ".join(escape_name(arg.name) for arg in decl.arguments)


def marshal(arg: Argument) -> str:
    """Expression converting one logical argument into its FFI parameter(s)."""

    name = escape_name(arg.name)
    if arg.kind is ArgKind.INT_LIST:
        return f"*_long_array({name})"
    if arg.kind is ArgKind.TENSOR_LIST:
        return f"*_tensor_array({name})"
    if arg.kind is ArgKind.BOOL:
        return f"(1 if {name} else 0)"
    if arg.kind in (ArgKind.SCALAR_TYPE, ArgKind.TENSOR_OPTIONS):
        return f"kind_to_int({name})"
    if arg.kind is ArgKind.DEVICE:
        return f"device_to_int({name})"
    if arg.kind is ArgKind.TENSOR:
        return f"{name}.ptr"
    if arg.kind is ArgKind.TENSOR_OPTION:
        return f"({name}.ptr if {name} is not None else None)"
    return name


class WrapperEmitter(Emitter):
    """Writes one ergonomic function per accepted declaration.

    The runtime module supplies the bound FFI namespace ``C``, the ``Tensor``
    handle class, ``free``, the ``kind_to_int``/``device_to_int`` encoders and
    ``last_error``, which returns the message of the last failed native call.
    """

    name = "wrapper"

    def __init__(self, destination: Path, *, runtime_module: str = DEFAULT_RUNTIME_MODULE) -> None:
        super().__init__(destination)
        self.runtime_module = runtime_module

    def render(self, funcs: Functions) -> Dict[Path, str]:
        gen = CodeGen()
        gen.lines(
            PY_BANNER,
            "import ctypes",
            "import weakref",
            "",
            f"from {self.runtime_module} import C, Tensor, device_to_int, free, kind_to_int, last_error",
        )
        gen.lines(*_PREAMBLE)
        gen.lines("", "")
        with gen.block("__all__ = [", "]"):
            for exported_name in funcs:
                gen.line(f"{exported_name!r},")
        for exported_name, decl in funcs.items():
            gen.lines("", "")
            with gen.block(f"def {exported_name}({python_parameters(decl)}):"):
                args = ", ".join(marshal(arg) for arg in decl.arguments)
                gen.line(f"return _wrap(C.{exported_name}({args}))")
        return {self.destination: gen.output()}
