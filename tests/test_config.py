from __future__ import annotations

from pathlib import Path

import pytest

from tensorbind.config import GeneratorConfig, load_config, resolve_config
from tensorbind.errors import ConfigError


def test_defaults() -> None:
    config = GeneratorConfig()
    assert config.schema == Path("data/Declarations.yaml")
    assert config.symbol_prefix == "atg_"
    assert config.runtime_module == ".runtime"


def test_load_config_resolves_relative_paths(write_yaml, tmp_path: Path) -> None:
    path = write_yaml(
        """
        schema: data/Declarations.yaml
        shim: gen/api
        ffi: gen/ffi.py
        wrapper: /abs/wrapper.py
        runtime_module: torchlib.runtime
        """,
        name="tensorbind.yaml",
    )
    config = load_config(path)
    assert config.schema == tmp_path.resolve() / "data/Declarations.yaml"
    assert config.shim == tmp_path.resolve() / "gen/api"
    assert config.wrapper == Path("/abs/wrapper.py")
    assert config.runtime_module == "torchlib.runtime"


def test_load_config_rejects_unknown_keys(write_yaml) -> None:
    path = write_yaml("schema: a.yaml\noutput: b\n", name="tensorbind.yaml")
    with pytest.raises(ConfigError) as exc:
        load_config(path)
    assert "output" in str(exc.value)


def test_load_config_requires_mapping(write_yaml) -> None:
    path = write_yaml("- a\n", name="tensorbind.yaml")
    with pytest.raises(ConfigError):
        load_config(path)


def test_overrides_take_precedence(write_yaml) -> None:
    path = write_yaml("schema: a.yaml\nffi: ffi.py\n", name="tensorbind.yaml")
    config = resolve_config(path, schema="other.yaml", ffi=None)
    assert config.schema == Path("other.yaml")
    assert config.ffi.name == "ffi.py"
