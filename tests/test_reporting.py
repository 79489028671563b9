from __future__ import annotations

import json
from pathlib import Path

from jsonschema import validate

from tensorbind.config import GeneratorConfig
from tensorbind.pipeline import GenerationOptions, collect_functions, generate
from tensorbind.reporting import JsonReporter, ReportManager, TerminalReporter
from tensorbind.reporting.json_reporter import build_payload
from tensorbind.reporting.schema import REPORT_SCHEMA


def _config(declarations_path: Path, output_paths) -> GeneratorConfig:
    shim, ffi, wrapper = output_paths
    return GeneratorConfig(schema=declarations_path, shim=shim, ffi=ffi, wrapper=wrapper)


def test_build_payload_matches_schema(declarations_path: Path, output_paths) -> None:
    result = collect_functions(_config(declarations_path, output_paths))
    payload = build_payload(result)
    validate(instance=payload, schema=REPORT_SCHEMA)
    assert payload["summary"] == {
        "records": 7,
        "accepted": 9,
        "rejected": {"private": 1, "return-type": 1},
        "up_to_date": True,
    }
    add1 = next(entry for entry in payload["functions"] if entry["exported_name"] == "add1")
    assert add1["kind"] == "function"
    assert [arg["name"] for arg in add1["arguments"]] == ["self", "other"]
    cat = next(entry for entry in payload["functions"] if entry["exported_name"] == "cat")
    assert cat["arguments"][1] == {"name": "dim", "kind": "int64", "default": "0"}


def test_json_reporter_writes_file(declarations_path: Path, output_paths, tmp_path: Path) -> None:
    report_path = tmp_path / "reports" / "run.json"
    reports = ReportManager([JsonReporter(str(report_path))])
    generate(_config(declarations_path, output_paths), GenerationOptions(check=True), reports=reports)
    payload = json.loads(report_path.read_text(encoding="utf-8"))
    assert payload["summary"]["up_to_date"] is False
    assert len(payload["artifacts"]) == 4
    assert all(entry["stale"] for entry in payload["artifacts"])


def test_terminal_reporter_verbose_lists_rejections(declarations_path: Path, output_paths, capsys) -> None:
    reports = ReportManager([TerminalReporter(use_color=False, verbose=True)])
    generate(_config(declarations_path, output_paths), reports=reports)
    out = capsys.readouterr().out
    assert "    rejected private: 1" in out
    assert "    rejected return-type: 1" in out
    assert f"    artifact: {output_paths[1]}" in out


def test_terminal_reporter_prints_stale_diff(declarations_path: Path, output_paths, capsys) -> None:
    config = _config(declarations_path, output_paths)
    generate(config)
    output_paths[1].write_text("outdated\n", encoding="utf-8")
    capsys.readouterr()
    reports = ReportManager([TerminalReporter(use_color=False)])
    generate(config, GenerationOptions(check=True), reports=reports)
    out = capsys.readouterr().out
    assert f"STALE {output_paths[1]}" in out
    assert "-outdated" in out
