from __future__ import annotations

import pytest

from records import arg

from tensorbind.core import ArgKind, FunctionDecl, FunctionKind, UnsupportedArgument, arg_kind_of_string, resolve_arguments
from tensorbind.errors import DeclarationError


@pytest.mark.parametrize(
    "dynamic_type, expected",
    [
        ("bool", ArgKind.BOOL),
        ("int64_t", ArgKind.INT64),
        ("double", ArgKind.DOUBLE),
        ("Tensor", ArgKind.TENSOR),
        ("TensorOptions", ArgKind.TENSOR_OPTIONS),
        ("IntList", ArgKind.INT_LIST),
        ("TensorList", ArgKind.TENSOR_LIST),
        ("Device", ArgKind.DEVICE),
        ("ScalarType", ArgKind.SCALAR_TYPE),
        ("Scalar", None),
        ("Generator", None),
    ],
)
def test_arg_kind_of_string(dynamic_type: str, expected) -> None:
    assert arg_kind_of_string(dynamic_type) is expected


def test_nullable_tensor_becomes_option() -> None:
    assert arg_kind_of_string("Tensor", is_nullable=True) is ArgKind.TENSOR_OPTION
    assert arg_kind_of_string("TENSOR", is_nullable=False) is ArgKind.TENSOR


def test_resolve_arguments_reads_nullable_and_default() -> None:
    arguments = resolve_arguments(
        [
            arg("self", "Tensor"),
            arg("weight", "Tensor", is_nullable="true", default="{}"),
            arg("reduction", "int64_t", default=1),
        ],
        FunctionKind.FUNCTION,
    )
    assert [(a.name, a.kind, a.default) for a in arguments] == [
        ("self", ArgKind.TENSOR, None),
        ("weight", ArgKind.TENSOR_OPTION, "{}"),
        ("reduction", ArgKind.INT64, "1"),
    ]


def test_function_first_argument_may_be_dropped() -> None:
    arguments = resolve_arguments(
        [arg("generator", "Generator", default="None"), arg("size", "IntList")],
        FunctionKind.FUNCTION,
    )
    assert [a.name for a in arguments] == ["size"]


def test_method_receiver_is_never_dropped() -> None:
    with pytest.raises(UnsupportedArgument):
        resolve_arguments(
            [arg("self", "SparseTensorRef", default="None"), arg("other", "Tensor")],
            FunctionKind.METHOD,
        )


def test_method_without_arguments_is_fatal() -> None:
    with pytest.raises(DeclarationError):
        FunctionDecl(name="grad", arguments=(), kind=FunctionKind.METHOD)


def test_forwarded_arguments_skip_receiver() -> None:
    decl = FunctionDecl(
        name="to",
        arguments=resolve_arguments([arg("self", "Tensor"), arg("device", "Device")], FunctionKind.METHOD),
        kind=FunctionKind.METHOD,
    )
    assert decl.receiver.name == "self"
    assert [a.name for a in decl.forwarded_arguments] == ["device"]
