from __future__ import annotations

from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

from covreport.cli._shared import (
    AnnotationsOption,
    InputPairsOption,
    UseEnvOption,
    build_lookup,
    build_reporter,
    resolve_use_color,
)
from covreport.cli.exit_codes import EXIT_CONFIG, EXIT_OK
from covreport.inputs.thresholds import ThresholdResolver
from covreport.io import OutputFormat, compute_io_policy, write_output
from covreport.render import render_thresholds

_BOOL_FALSE = False


def thresholds_cmd(
    pairs: InputPairsOption = None,
    use_env: UseEnvOption = True,
    annotations: AnnotationsOption = _BOOL_FALSE,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Exit with status 78 if any threshold input was rejected."),
    ] = _BOOL_FALSE,
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", help="Output format.", case_sensitive=False),
    ] = OutputFormat.AUTO,
    output: Annotated[
        Path | None,
        typer.Option("--output", help="Write output to PATH (use '-' for stdout)."),
    ] = None,
    color: Annotated[
        bool,
        typer.Option("--color", help="Force color output"),
    ] = _BOOL_FALSE,
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Disable color output"),
    ] = _BOOL_FALSE,
) -> None:
    """Validate the threshold-* inputs and show the thresholds that apply."""
    lookup = build_lookup(pairs, use_env=use_env)
    render_fmt, color_allowed = compute_io_policy(fmt=fmt, output=output)
    resolver = ThresholdResolver(build_reporter(annotations=annotations, fmt=render_fmt, output=output))
    resolution = resolver.evaluate(lookup)
    resolver.report(resolution)

    use_color = resolve_use_color(color=color, no_color=no_color, color_allowed=color_allowed)

    write_output(render_thresholds(resolution, fmt=render_fmt, color=use_color), output)

    if strict and resolution.diagnostics:
        raise typer.Exit(code=EXIT_CONFIG)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("thresholds")(thresholds_cmd)


__all__ = ["register"]
