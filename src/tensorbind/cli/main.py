"""CLI entry point for tensorbind."""
from __future__ import annotations

import sys
from typing import Optional

import click

from tensorbind import __version__
from tensorbind.config import resolve_config
from tensorbind.errors import TensorbindError
from tensorbind.pipeline import GenerationOptions, generate
from tensorbind.reporting import JsonReporter, ReportManager, TerminalReporter


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


class CliState:
    """Holds global CLI state."""

    def __init__(self, verbose: bool) -> None:
        self.verbose = verbose


def _print_version(_: click.Context, __: click.Parameter, value: bool) -> None:
    if not value or click.get_current_context().resilient_parsing:
        return
    click.echo(f"tensorbind {__version__}")
    raise click.exceptions.Exit()


@click.group(context_settings=CONTEXT_SETTINGS)
@click.option("--verbose", is_flag=True, help="Print rejection counts and artifact paths.")
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show the tensorbind version and exit.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Generate C shims and Python bindings from tensor-library declarations."""

    ctx.obj = CliState(verbose=verbose)


@cli.command("generate")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML file providing schema/shim/ffi/wrapper paths.",
)
@click.option("--schema", type=click.Path(dir_okay=False), help="Declarations YAML file to read.")
@click.option("--shim", type=click.Path(dir_okay=False), help="Base path of the C++ shim (.cpp.h and .h are appended).")
@click.option("--ffi", type=click.Path(dir_okay=False), help="Destination of the ctypes declaration module.")
@click.option("--wrapper", type=click.Path(dir_okay=False), help="Destination of the high-level wrapper module.")
@click.option("--runtime-module", type=str, help="Module the wrapper imports its runtime helpers from.")
@click.option("--check", is_flag=True, help="Exit non-zero when generated artifacts are out of date; write nothing.")
@click.option("--list", "list_only", is_flag=True, help="List exported names without writing artifacts.")
@click.option(
    "--report",
    "report_format",
    type=click.Choice(["terminal", "json"]),
    default="terminal",
    show_default=True,
    help="Report format (terminal by default).",
)
@click.option("--report-path", type=str, help="When --report json, write to this path.")
@click.option("--no-color", is_flag=True, help="Disable ANSI colors in terminal output.")
@click.pass_obj
def generate_cmd(
    state: CliState,
    config_path: Optional[str],
    schema: Optional[str],
    shim: Optional[str],
    ffi: Optional[str],
    wrapper: Optional[str],
    runtime_module: Optional[str],
    check: bool,
    list_only: bool,
    report_format: str,
    report_path: Optional[str],
    no_color: bool,
) -> None:
    """Read the declarations and write the three binding artifacts."""

    if report_format == "json":
        reporter = JsonReporter(report_path)
    else:
        reporter = TerminalReporter(use_color=not no_color, verbose=state.verbose, list_names=list_only)
    try:
        config = resolve_config(
            config_path,
            schema=schema,
            shim=shim,
            ffi=ffi,
            wrapper=wrapper,
            runtime_module=runtime_module,
        )
        result = generate(
            config,
            GenerationOptions(check=check, list_only=list_only),
            reports=ReportManager([reporter]),
        )
    except (TensorbindError, OSError) as exc:
        raise click.ClickException(str(exc)) from exc
    raise click.exceptions.Exit(0 if result.up_to_date else 1)


def main(argv: Optional[list[str]] = None) -> int:
    """Program entry point for console_scripts shim."""

    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=argv, prog_name="tensorbind", standalone_mode=True)
    except click.ClickException as err:  # pragma: no cover - click handles display
        err.show()
        return err.exit_code
    except SystemExit as exc:  # click may raise exit code
        return int(exc.code or 0)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
