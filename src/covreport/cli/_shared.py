from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

import typer

from covreport.cli.exit_codes import EXIT_CONFIG
from covreport.config import ACTION_INPUT_DEFAULTS
from covreport.errors import InputSyntaxError
from covreport.inputs.lookup import ChainLookup, EnvironmentLookup, MappingLookup, parse_input_pairs
from covreport.inputs.reporting import ActionsReporter, LoggingReporter
from covreport.io import OutputFormat

if TYPE_CHECKING:
    from covreport.inputs.lookup import InputLookup
    from covreport.inputs.reporting import Reporter

InputPairsOption = Annotated[
    list[str] | None,
    typer.Option(
        "-I",
        "--input",
        metavar="KEY=VALUE",
        help="Action input value, e.g. threshold-lines=80 (repeatable). KEY= clears an environment value.",
    ),
]
UseEnvOption = Annotated[
    bool,
    typer.Option("--env/--no-env", help="Also read INPUT_* environment variables."),
]
AnnotationsOption = Annotated[
    bool,
    typer.Option("--annotations", help="Report issues as GitHub Actions workflow commands."),
]


def build_lookup(pairs: list[str] | None, *, use_env: bool, with_defaults: bool = False) -> InputLookup:
    """Layer explicit pairs over the environment (and optionally action defaults)."""
    try:
        explicit = parse_input_pairs(pairs or [])
    except InputSyntaxError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_CONFIG) from exc

    lookups: list[InputLookup] = []
    if use_env:
        lookups.append(EnvironmentLookup(os.environ))
    if with_defaults:
        defaults = dict(ACTION_INPUT_DEFAULTS)
        defaults["file-coverage-root-path"] = os.environ.get("GITHUB_WORKSPACE", "")
        lookups.append(MappingLookup(defaults))
    return MappingLookup(explicit, fallback=ChainLookup(*lookups))


def build_reporter(*, annotations: bool, fmt: OutputFormat, output: Path | None) -> Reporter:
    """Pick the diagnostics channel; annotations never share stdout with JSON output."""
    if not annotations:
        return LoggingReporter()
    if fmt == OutputFormat.JSON and output in {None, Path("-")}:
        return ActionsReporter(sys.stderr)
    return ActionsReporter()


def resolve_use_color(*, color: bool, no_color: bool, color_allowed: bool) -> bool:
    # CLI flags take precedence over the IO policy default.
    if no_color:
        return False
    if color:
        return True
    return color_allowed
