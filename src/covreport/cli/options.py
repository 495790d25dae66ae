from __future__ import annotations

import os
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
from covreport.cli.exit_codes import EXIT_DATAERR, EXIT_OK
from covreport.errors import EventPayloadError
from covreport.inputs.github_context import GitHubContext
from covreport.inputs.options import read_options
from covreport.io import OutputFormat, compute_io_policy, write_output
from covreport.render import render_options

_BOOL_FALSE = False


def options_cmd(
    pairs: InputPairsOption = None,
    use_env: UseEnvOption = True,
    annotations: AnnotationsOption = _BOOL_FALSE,
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
    """Resolve every action input into the options used for reporting."""
    lookup = build_lookup(pairs, use_env=use_env, with_defaults=True)
    render_fmt, color_allowed = compute_io_policy(fmt=fmt, output=output)
    reporter = build_reporter(annotations=annotations, fmt=render_fmt, output=output)

    try:
        context = GitHubContext.from_env(os.environ)
    except EventPayloadError as exc:
        typer.echo(f"ERROR: {exc}", err=True)
        raise typer.Exit(code=EXIT_DATAERR) from exc

    options = read_options(lookup, reporter=reporter, context=context)

    use_color = resolve_use_color(color=color, no_color=no_color, color_allowed=color_allowed)
    write_output(render_options(options, fmt=render_fmt, color=use_color), output)
    raise typer.Exit(code=EXIT_OK)


def register(app: typer.Typer) -> None:
    app.command("options")(options_cmd)


__all__ = ["register"]
