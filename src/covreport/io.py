from __future__ import annotations

import sys
from enum import StrEnum
from pathlib import Path

import click.utils as click_utils


class OutputFormat(StrEnum):
    AUTO = "auto"
    HUMAN = "human"
    JSON = "json"


def write_output(text: str, destination: Path | None) -> None:
    """Write output to stdout or a file (PATH or '-' for stdout)."""
    if destination is None or destination == Path("-"):
        print(text)
        return
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(text, encoding="utf-8")


def compute_io_policy(*, fmt: OutputFormat, output: Path | None) -> tuple[OutputFormat, bool]:
    """Return (resolved format, color_allowed)."""
    allow_tty_output = output in {None, Path("-")}
    stdout = sys.stdout

    stdout_is_tty = allow_tty_output and bool(getattr(stdout, "isatty", lambda: False)())
    ansi_allowed = not click_utils.should_strip_ansi(stdout)

    if fmt == OutputFormat.AUTO:
        fmt_resolved = OutputFormat.HUMAN if stdout_is_tty else OutputFormat.JSON
    else:
        fmt_resolved = fmt

    color_allowed = bool(fmt_resolved == OutputFormat.HUMAN and stdout_is_tty and ansi_allowed)
    return fmt_resolved, color_allowed


__all__ = ["OutputFormat", "compute_io_policy", "write_output"]
