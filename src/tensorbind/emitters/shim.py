"""C++ shim exposing each accepted function through a flat C ABI."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from tensorbind.core import ArgKind, Argument, FunctionDecl

from .base import C_BANNER, Emitter, Functions
from .codegen import CodeGen

_SCALAR_C_TYPES = {
    ArgKind.BOOL: "int",
    ArgKind.INT64: "int64_t",
    ArgKind.DOUBLE: "double",
    ArgKind.TENSOR: "tensor",
    ArgKind.TENSOR_OPTION: "tensor",
    ArgKind.TENSOR_OPTIONS: "int",  # only the scalar kind is forwarded for now
    ArgKind.SCALAR_TYPE: "int",
    ArgKind.DEVICE: "int",
}

_LIST_C_TYPES = {
    ArgKind.INT_LIST: "long int",
    ArgKind.TENSOR_LIST: "tensor",
}


def c_parameters(decl: FunctionDecl) -> str:
    """Flat-ABI parameter list; list arguments become a data/length pair."""

    params: list[str] = []
    for arg in decl.arguments:
        if arg.kind.is_list:
            element = _LIST_C_TYPES[arg.kind]
            params.append(f"{element} *{arg.name}_data, int {arg.name}_len")
        else:
            params.append(f"{_SCALAR_C_TYPES[arg.kind]} {arg.name}")
    return ", ".join(params)


def c_argument(arg: Argument) -> str:
    name = arg.name
    if arg.kind is ArgKind.TENSOR:
        return f"*{name}"
    if arg.kind is ArgKind.TENSOR_OPTION:
        return f"({name} ? *{name} : torch::Tensor())"
    if arg.kind is ArgKind.BOOL:
        return f"(bool){name}"
    if arg.kind is ArgKind.INT_LIST:
        return f"of_carray_long_int({name}_data, {name}_len)"
    if arg.kind is ArgKind.TENSOR_LIST:
        return f"of_carray_tensor({name}_data, {name}_len)"
    if arg.kind in (ArgKind.SCALAR_TYPE, ArgKind.TENSOR_OPTIONS):
        return f"torch::ScalarType({name})"
    if arg.kind is ArgKind.DEVICE:
        return f"torch::Device(torch::DeviceType({name}))"
    return name


def c_call(decl: FunctionDecl) -> str:
    """Native call: namespace-qualified for functions, receiver-dispatched for methods."""

    args = ", ".join(c_argument(arg) for arg in decl.forwarded_arguments)
    if decl.is_method:
        return f"{decl.receiver.name}->{decl.name}({args})"
    return f"torch::{decl.name}({args})"


class ShimEmitter(Emitter):
    """Writes ``<destination>.cpp.h`` definitions and ``<destination>.h`` declarations."""

    name = "shim"

    @property
    def source_path(self) -> Path:
        return self.destination.with_name(self.destination.name + ".cpp.h")

    @property
    def header_path(self) -> Path:
        return self.destination.with_name(self.destination.name + ".h")

    def render(self, funcs: Functions) -> Dict[Path, str]:
        source = CodeGen(indent="  ")
        header = CodeGen(indent="  ")
        for gen in (source, header):
            gen.lines("", C_BANNER, "")
        for exported_name, decl in funcs.items():
            signature = f"tensor {self.symbol(exported_name)}({c_parameters(decl)})"
            with source.block(f"{signature} {{", "}"):
                # PROTECT turns a thrown exception into an error status and a null handle.
                with source.block("PROTECT(", ")"):
                    source.line(f"return new torch::Tensor({c_call(decl)});")
            source.line()
            header.line(f"{signature};")
        return {self.source_path: source.output(), self.header_path: header.output()}
