"""Runs the load, filter, naming and emission stages in sequence."""
from __future__ import annotations

import difflib
from dataclasses import replace
from pathlib import Path
from typing import Dict, Mapping, Optional

from tensorbind.config import GeneratorConfig
from tensorbind.core import FunctionDecl
from tensorbind.declarations import assign_exported_names, filter_records, with_seeds
from tensorbind.emitters import Emitter, FfiEmitter, ShimEmitter, WrapperEmitter, write_artifact
from tensorbind.reporting import ReportManager
from tensorbind.schema import load_records

from .models import GenerationOptions, GenerationResult


def build_emitters(config: GeneratorConfig) -> tuple[Emitter, ...]:
    return (
        ShimEmitter(config.shim, symbol_prefix=config.symbol_prefix),
        FfiEmitter(config.ffi, symbol_prefix=config.symbol_prefix),
        WrapperEmitter(config.wrapper, runtime_module=config.runtime_module),
    )


def collect_functions(config: GeneratorConfig, reports: Optional[ReportManager] = None) -> GenerationResult:
    """Load the schema and build the immutable exported-name map."""

    reports = reports or ReportManager(())
    records = load_records(config.schema)
    reports.records_read(config.schema, len(records))
    filtered = filter_records(with_seeds(records))
    reports.functions_accepted(len(filtered.accepted))
    functions = assign_exported_names(filtered.accepted)
    return GenerationResult(
        schema=config.schema,
        records=len(records),
        functions=functions,
        rejected=dict(sorted(filtered.rejected.items())),
    )


def render_artifacts(config: GeneratorConfig, functions: Mapping[str, FunctionDecl]) -> Dict[Path, str]:
    rendered: Dict[Path, str] = {}
    for emitter in build_emitters(config):
        rendered.update(emitter.render(functions))
    return rendered


def generate(
    config: GeneratorConfig,
    options: Optional[GenerationOptions] = None,
    *,
    reports: Optional[ReportManager] = None,
) -> GenerationResult:
    """Run the full pipeline.

    Every artifact is rendered before any file is written, so a fatal error
    leaves existing outputs untouched. With ``options.check`` nothing is
    written and stale artifacts are reported instead.
    """

    options = options or GenerationOptions()
    reports = reports or ReportManager(())
    collected = collect_functions(config, reports)
    if options.list_only:
        reports.complete(collected)
        return collected
    rendered = render_artifacts(config, collected.functions)
    if options.check:
        diffs = _stale_artifacts(rendered)
        result = replace(collected, artifacts=tuple(rendered), stale=tuple(diffs), diffs=diffs)
    else:
        for path, content in rendered.items():
            write_artifact(path, content)
        result = replace(collected, artifacts=tuple(rendered))
    reports.complete(result)
    return result


def _stale_artifacts(rendered: Mapping[Path, str]) -> Dict[Path, str]:
    diffs: Dict[Path, str] = {}
    for path, content in rendered.items():
        existing = path.read_text(encoding="utf-8") if path.exists() else ""
        if existing == content:
            continue
        diff = difflib.unified_diff(
            existing.splitlines(),
            content.splitlines(),
            fromfile=f"a/{path}",
            tofile=f"b/{path}",
            lineterm="",
        )
        diffs[path] = "\n".join(diff)
    return diffs
