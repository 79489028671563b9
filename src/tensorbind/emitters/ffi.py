"""ctypes declaration module mirroring the shim's flat ABI."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Tuple

from tensorbind.core import ArgKind, FunctionDecl

from .base import PY_BANNER, Emitter, Functions
from .codegen import CodeGen

# Flattened parameter kinds, one or two per logical argument.
_SIGNATURE_KINDS: Dict[ArgKind, Tuple[str, ...]] = {
    ArgKind.BOOL: ("int",),
    ArgKind.INT64: ("int64_t",),
    ArgKind.DOUBLE: ("double",),
    ArgKind.TENSOR: ("t",),
    ArgKind.TENSOR_OPTION: ("t",),
    ArgKind.TENSOR_OPTIONS: ("int",),
    ArgKind.SCALAR_TYPE: ("int",),
    ArgKind.DEVICE: ("int",),
    ArgKind.INT_LIST: ("ptr long", "int"),
    ArgKind.TENSOR_LIST: ("ptr t", "int"),
}

_CTYPES = {
    "int": "ctypes.c_int",
    "int64_t": "ctypes.c_int64",
    "double": "ctypes.c_double",
    "t": "t",
    "ptr long": "ctypes.POINTER(ctypes.c_long)",
    "ptr t": "ctypes.POINTER(t)",
}


def signature_kinds(decl: FunctionDecl) -> Tuple[str, ...]:
    kinds: list[str] = []
    for arg in decl.arguments:
        kinds.extend(_SIGNATURE_KINDS[arg.kind])
    return tuple(kinds)


def ctypes_argtypes(decl: FunctionDecl) -> str:
    return "[" + ", ".join(_CTYPES[kind] for kind in signature_kinds(decl)) + "]"


class FfiEmitter(Emitter):
    """Writes the low-level ``ctypes`` declarations; every entry returns ``t``."""

    name = "ffi"

    def render(self, funcs: Functions) -> Dict[Path, str]:
        gen = CodeGen()
        gen.lines(PY_BANNER, "import ctypes", "", "t = ctypes.c_void_p", "", "")
        with gen.block("def foreign(lib, symbol, argtypes):"):
            gen.lines(
                "func = getattr(lib, symbol)",
                "func.argtypes = argtypes",
                "func.restype = t",
                "return func",
            )
        gen.lines("", "")
        with gen.block("SIGNATURES = {", "}"):
            for exported_name, decl in funcs.items():
                kinds = "".join(f"{kind!r}, " for kind in signature_kinds(decl)).rstrip(" ")
                gen.line(f"{exported_name!r}: ({kinds}),")
        gen.lines("", "")
        with gen.block("class C:"):
            with gen.block("def __init__(self, lib):"):
                gen.line("self.lib = lib")
                for exported_name, decl in funcs.items():
                    symbol = self.symbol(exported_name)
                    gen.line(f"self.{exported_name} = foreign(lib, {symbol!r}, {ctypes_argtypes(decl)})")
        return {self.destination: gen.output()}
