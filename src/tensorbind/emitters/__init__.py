"""Artifact emitters."""
from .base import DEFAULT_SYMBOL_PREFIX, Emitter, write_artifact
from .codegen import CodeGen
from .ffi import FfiEmitter
from .shim import ShimEmitter
from .wrapper import DEFAULT_RUNTIME_MODULE, WrapperEmitter

__all__ = [
    "CodeGen",
    "DEFAULT_RUNTIME_MODULE",
    "DEFAULT_SYMBOL_PREFIX",
    "Emitter",
    "FfiEmitter",
    "ShimEmitter",
    "WrapperEmitter",
    "write_artifact",
]
