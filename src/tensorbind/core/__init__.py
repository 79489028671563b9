"""Core models and helpers exposed at the package level."""
from .models import Argument, ArgKind, FunctionDecl, FunctionKind
from .types import UnsupportedArgument, arg_kind_of_string, resolve_arguments

__all__ = [
    "ArgKind",
    "Argument",
    "FunctionDecl",
    "FunctionKind",
    "UnsupportedArgument",
    "arg_kind_of_string",
    "resolve_arguments",
]
