"""Generator configuration: four artifact paths plus emitter settings."""
from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from tensorbind.emitters import DEFAULT_RUNTIME_MODULE, DEFAULT_SYMBOL_PREFIX
from tensorbind.errors import ConfigError

CONFIG_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "schema": {"type": "string", "minLength": 1},
        "shim": {"type": "string", "minLength": 1},
        "ffi": {"type": "string", "minLength": 1},
        "wrapper": {"type": "string", "minLength": 1},
        "runtime_module": {"type": "string", "minLength": 1},
        "symbol_prefix": {"type": "string", "pattern": "^[A-Za-z_][A-Za-z0-9_]*$"},
    },
}
_validator = Draft7Validator(CONFIG_SCHEMA)

PATH_KEYS = ("schema", "shim", "ffi", "wrapper")


@dataclass(frozen=True)
class GeneratorConfig:
    schema: Path = Path("data/Declarations.yaml")
    shim: Path = Path("src/wrapper/torch_api_generated")
    ffi: Path = Path("src/bindings/torch_bindings_generated.py")
    wrapper: Path = Path("src/bindings/wrapper_generated.py")
    runtime_module: str = DEFAULT_RUNTIME_MODULE
    symbol_prefix: str = DEFAULT_SYMBOL_PREFIX

    def with_overrides(self, **overrides: Any) -> "GeneratorConfig":
        """Return a copy with every non-``None`` override applied."""

        values = {key: value for key, value in overrides.items() if value is not None}
        for key in PATH_KEYS:
            if key in values:
                values[key] = Path(values[key])
        return replace(self, **values)


def load_config(path: str | Path) -> GeneratorConfig:
    """Load and validate a YAML config file.

    Relative paths are resolved against the directory holding the file.
    """

    config_path = Path(path).expanduser().resolve()
    raw = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ConfigError("Config file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: [str(part) for part in e.path])
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ConfigError(f"Config schema validation failed: {messages}")
    values = dict(raw)
    for key in PATH_KEYS:
        if key in values:
            values[key] = _resolve(config_path.parent, values[key])
    return GeneratorConfig().with_overrides(**values)


def resolve_config(config_path: Optional[str | Path] = None, **overrides: Any) -> GeneratorConfig:
    """Defaults, then the optional config file, then explicit overrides."""

    config = load_config(config_path) if config_path else GeneratorConfig()
    return config.with_overrides(**overrides)


def _resolve(base: Path, value: str) -> Path:
    path = Path(value).expanduser()
    if not path.is_absolute():
        path = base / path
    return path
