from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from tensorbind import __version__
from tensorbind.cli.main import cli


def _paths_args(declarations_path: Path, output_paths) -> list[str]:
    shim, ffi, wrapper = output_paths
    return ["--schema", str(declarations_path), "--shim", str(shim), "--ffi", str(ffi), "--wrapper", str(wrapper)]


def test_cli_help_short_flag() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["-h"])
    assert result.exit_code == 0
    assert "Usage:" in result.output
    assert "generate" in result.output


def test_cli_version() -> None:
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_generate_writes_artifacts(declarations_path: Path, output_paths) -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "--no-color", *_paths_args(declarations_path, output_paths)])
    assert result.exit_code == 0, result.output
    assert "Generating code for 9 functions." in result.output
    assert output_paths[2].exists()


def test_cli_check_exits_non_zero_when_stale(declarations_path: Path, output_paths) -> None:
    runner = CliRunner()
    args = ["generate", "--no-color", *_paths_args(declarations_path, output_paths)]
    stale = runner.invoke(cli, [*args, "--check"])
    assert stale.exit_code == 1
    assert not output_paths[1].exists()
    assert runner.invoke(cli, args).exit_code == 0
    fresh = runner.invoke(cli, [*args, "--check"])
    assert fresh.exit_code == 0, fresh.output


def test_cli_config_file(declarations_path: Path, tmp_path: Path) -> None:
    config = tmp_path / "tensorbind.yaml"
    config.write_text(
        "schema: Declarations.yaml\nshim: gen/api\nffi: gen/ffi.py\nwrapper: gen/wrapper.py\n",
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["generate", "--no-color", "--config", str(config)])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "gen" / "api.cpp.h").exists()
    assert (tmp_path / "gen" / "wrapper.py").exists()


def test_cli_json_report_to_stdout(declarations_path: Path, output_paths) -> None:
    result = CliRunner().invoke(
        cli, ["generate", "--report", "json", "--list", *_paths_args(declarations_path, output_paths)]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["summary"]["accepted"] == 9
    assert payload["artifacts"] == []


def test_cli_reports_schema_errors(write_yaml, output_paths) -> None:
    schema = write_yaml("- name: abs\n  returns: Tensor\n")
    shim, ffi, wrapper = output_paths
    result = CliRunner().invoke(
        cli, ["generate", "--schema", str(schema), "--shim", str(shim), "--ffi", str(ffi), "--wrapper", str(wrapper)]
    )
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not ffi.exists()
