from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Tuple

import pytest

DECLARATIONS = """
# generated by the native build
- name: abs
  deprecated: false
  method_of:
  - Type
  - Tensor
  - namespace
  arguments:
  - name: self
    dynamic_type: Tensor
  returns:
  - dynamic_type: Tensor
- name: add
  deprecated: false
  method_of:
  - Tensor
  - namespace
  arguments:
  - name: self
    dynamic_type: Tensor
  - name: other
    dynamic_type: Tensor
  - name: alpha
    dynamic_type: Scalar
    default: 1
  returns:
  - dynamic_type: Tensor
- name: Add
  deprecated: "false"
  method_of:
  - namespace
  arguments:
  - name: self
    dynamic_type: Tensor
  - name: other
    dynamic_type: double
  returns:
  - dynamic_type: Tensor
- name: cat
  deprecated: false
  method_of:
  - namespace
  arguments:
  - name: tensors
    dynamic_type: TensorList
  - name: dim
    dynamic_type: int64_t
    default: 0
  returns:
  - dynamic_type: Tensor
- name: view
  deprecated: false
  method_of:
  - Tensor
  arguments:
  - name: self
    dynamic_type: Tensor
  - name: size
    dynamic_type: IntList
  returns:
  - dynamic_type: Tensor
- name: size
  deprecated: false
  method_of:
  - Tensor
  - namespace
  arguments:
  - name: self
    dynamic_type: Tensor
  - name: dim
    dynamic_type: int64_t
  returns:
  - dynamic_type: int64_t
- name: _private_op
  deprecated: false
  method_of:
  - namespace
  arguments: []
  returns:
  - dynamic_type: Tensor
"""


@pytest.fixture
def write_yaml(tmp_path: Path):
    def _write(content: str, name: str = "Declarations.yaml") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def declarations_path(write_yaml) -> Path:
    return write_yaml(DECLARATIONS)


@pytest.fixture
def output_paths(tmp_path: Path) -> Tuple[Path, Path, Path]:
    out = tmp_path / "out"
    return out / "torch_api_generated", out / "torch_bindings_generated.py", out / "wrapper_generated.py"
